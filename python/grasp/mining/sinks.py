"""Consumers of mined representative patterns."""

from __future__ import annotations

from abc import ABC, abstractmethod

from grasp.core.types import RepresentativePattern


class PatternSink(ABC):
    """Receives patterns as the miner produces them."""

    @abstractmethod
    def accept(self, pattern: RepresentativePattern) -> None:
        """Handle one finished pattern."""

    def finish(self) -> None:
        """Called once after the last pattern of a run."""


class CollectingSink(PatternSink):
    """Keep every pattern in memory, in emission order."""

    def __init__(self) -> None:
        self.patterns: list[RepresentativePattern] = []

    def accept(self, pattern: RepresentativePattern) -> None:
        self.patterns.append(pattern)

    def __len__(self) -> int:
        return len(self.patterns)
