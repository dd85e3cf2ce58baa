"""
GRASP: Greedy Representative Sequence Mining

Mines long, frequent, gap-tolerant contiguous patterns from integer item
sequences by growing maximal supported walks through a transition graph.
"""

from grasp.core.types import RepresentativePattern
from grasp.core.config import GraspConfig, MiningConfig
from grasp.mining.miner import GraspMiner
from grasp.mining.sinks import CollectingSink, PatternSink

__version__ = "0.1.0"
__all__ = [
    "RepresentativePattern",
    "GraspConfig",
    "MiningConfig",
    "GraspMiner",
    "CollectingSink",
    "PatternSink",
]
