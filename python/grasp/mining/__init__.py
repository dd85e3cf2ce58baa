"""Representative sequence mining engine."""

from grasp.mining.claims import EdgeClaims
from grasp.mining.miner import GraspMiner, Path
from grasp.mining.sinks import CollectingSink, PatternSink

__all__ = ["EdgeClaims", "GraspMiner", "Path", "CollectingSink", "PatternSink"]
