"""Core types, configurations and errors for GRASP."""

from grasp.core.types import (
    ItemId,
    Occurrence,
    RepresentativePattern,
    SequenceDatabase,
)
from grasp.core.config import GraspConfig, MiningConfig, OutputConfig
from grasp.core.errors import GraspError, InputUnreadableError, OutputUnwritableError

__all__ = [
    "ItemId",
    "Occurrence",
    "RepresentativePattern",
    "SequenceDatabase",
    "GraspConfig",
    "MiningConfig",
    "OutputConfig",
    "GraspError",
    "InputUnreadableError",
    "OutputUnwritableError",
]
