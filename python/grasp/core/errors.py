"""Failure kinds surfaced by the data collaborators around the miner."""

from __future__ import annotations

from pathlib import Path


class GraspError(Exception):
    """Base exception for GRASP errors."""


class InputUnreadableError(GraspError):
    """Raised when a sequence database cannot be read or parsed.

    Attributes:
        path: The file that failed to load.
        reason: Short description of the underlying failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read sequence database {path}: {reason}")


class OutputUnwritableError(GraspError):
    """Raised when mined patterns cannot be written to their destination.

    Attributes:
        path: The output file.
        reason: Short description of the underlying failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write patterns to {path}: {reason}")
