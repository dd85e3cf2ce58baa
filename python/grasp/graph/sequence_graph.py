"""Transition graph built from a sequence database."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from grasp.core.types import ItemId, Occurrence, SequenceDatabase
from grasp.graph.visitations import Visitations

logger = structlog.get_logger()


@dataclass(eq=False, slots=True)
class SequenceNode:
    """One distinct item, with its outgoing transitions keyed by next item."""

    id: ItemId
    out_edges: dict[ItemId, SequenceEdge] = field(default_factory=dict)

    def get_out_edge(self, item: ItemId) -> SequenceEdge | None:
        return self.out_edges.get(item)

    def __repr__(self) -> str:
        return f"SequenceNode({self.id}, out={sorted(self.out_edges)})"


@dataclass(frozen=True, eq=False, slots=True)
class SequenceEdge:
    """An observed source -> destination transition."""

    id: int
    source: SequenceNode
    destination: SequenceNode
    visitations: Visitations

    @property
    def support(self) -> int:
        return self.visitations.support

    @property
    def cover(self) -> int:
        return self.visitations.cover

    def __repr__(self) -> str:
        return (
            f"SequenceEdge(id={self.id}, {self.source.id}->{self.destination.id}, "
            f"support={self.support})"
        )


class SequenceGraph:
    """A connected component of the item transition graph."""

    def __init__(self) -> None:
        self.nodes: dict[ItemId, SequenceNode] = {}
        self.edges: list[SequenceEdge] = []

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_node(self, item: ItemId) -> SequenceNode | None:
        return self.nodes.get(item)

    def _node(self, item: ItemId) -> SequenceNode:
        node = self.nodes.get(item)
        if node is None:
            node = SequenceNode(item)
            self.nodes[item] = node
        return node

    def _add_edge(
        self,
        source: ItemId,
        destination: ItemId,
        occurrences: dict[int, list[Occurrence]],
    ) -> SequenceEdge:
        src = self._node(source)
        dst = self._node(destination)
        edge = SequenceEdge(
            id=len(self.edges),
            source=src,
            destination=dst,
            visitations=Visitations(occurrences),
        )
        self.edges.append(edge)
        src.out_edges[destination] = edge
        return edge

    def __repr__(self) -> str:
        return f"SequenceGraph(nodes={len(self.nodes)}, edges={len(self.edges)})"

    @classmethod
    def from_sequences(cls, sequences: SequenceDatabase) -> list[SequenceGraph]:
        """Build one independent graph per connected component.

        Edge ids are assigned per graph in discovery order (sequence order,
        then position), and graphs are ordered by the first appearance of
        any of their items.
        """
        transitions: dict[tuple[ItemId, ItemId], dict[int, list[Occurrence]]] = {}
        components = _DisjointItems()

        for sid, sequence in enumerate(sequences):
            previous: ItemId | None = None
            for pos, raw in enumerate(sequence):
                item = int(raw)
                components.add(item)
                if previous is not None:
                    components.union(previous, item)
                    per_seq = transitions.setdefault((previous, item), {})
                    per_seq.setdefault(sid, []).append(Occurrence(pos - 1, pos))
                previous = item

        graphs: dict[ItemId, SequenceGraph] = {}
        for item in components.items():
            root = components.find(item)
            if root not in graphs:
                graphs[root] = cls()
            graphs[root]._node(item)

        for (source, destination), occurrences in transitions.items():
            graphs[components.find(source)]._add_edge(source, destination, occurrences)

        result = list(graphs.values())
        logger.info(
            "graphs_extracted",
            graphs=len(result),
            nodes=sum(len(g.nodes) for g in result),
            edges=sum(g.edge_count for g in result),
        )
        return result


class _DisjointItems:
    """Union-find over item ids, remembering first-seen order."""

    def __init__(self) -> None:
        self._parent: dict[ItemId, ItemId] = {}

    def add(self, item: ItemId) -> None:
        if item not in self._parent:
            self._parent[item] = item

    def items(self) -> list[ItemId]:
        return list(self._parent)

    def find(self, item: ItemId) -> ItemId:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: ItemId, b: ItemId) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        self._parent[rb] = ra


def summarize(graphs: list[SequenceGraph], min_sup: int = 1) -> list[dict[str, int]]:
    """Per-graph counts of nodes, edges and edges meeting ``min_sup``."""
    summary: list[dict[str, int]] = []
    for index, graph in enumerate(graphs):
        supported = sum(1 for edge in graph.edges if edge.support >= min_sup)
        summary.append({
            "graph": index,
            "nodes": len(graph.nodes),
            "edges": graph.edge_count,
            "supported_edges": supported,
        })
    return summary

