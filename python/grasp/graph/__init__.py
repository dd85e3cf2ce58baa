"""Transition graph, occurrence bookkeeping and sequence cursors."""

from grasp.graph.cursor import Cursor
from grasp.graph.visitations import Visitations
from grasp.graph.sequence_graph import SequenceEdge, SequenceGraph, SequenceNode

__all__ = ["Cursor", "Visitations", "SequenceEdge", "SequenceGraph", "SequenceNode"]
