"""Core type definitions for GRASP representative sequence mining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeAlias

ItemId: TypeAlias = int
SequenceDatabase: TypeAlias = Sequence[Sequence[int]]


@dataclass(frozen=True, slots=True)
class Occurrence:
    """Span of one matched walk inside a sequence (inclusive positions)."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class RepresentativePattern:
    """A mined contiguous pattern with its cover and support."""

    items: tuple[ItemId, ...]
    cover: int
    support: int

    def __len__(self) -> int:
        return len(self.items)

    def to_spmf(self, include_cover: bool = False) -> str:
        """Render the pattern as an SPMF pattern line."""
        body = " ".join(f"{item} -1" for item in self.items)
        line = f"{body} #SUP: {self.support}"
        if include_cover:
            line += f" #COVER: {self.cover}"
        return line
