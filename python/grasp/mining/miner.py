"""Greedy representative sequence mining over transition graphs."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path as FilePath

import structlog

from grasp.core.config import MiningConfig
from grasp.core.types import ItemId, RepresentativePattern, SequenceDatabase
from grasp.graph.cursor import Cursor
from grasp.graph.sequence_graph import SequenceEdge, SequenceGraph, SequenceNode
from grasp.graph.visitations import Visitations
from grasp.mining.claims import EdgeClaims
from grasp.mining.sinks import CollectingSink, PatternSink

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Path:
    """A walk being grown through the graph, with its visitations."""

    edges: tuple[SequenceEdge, ...]
    visitations: Visitations = field(compare=False)

    def size(self) -> int:
        """Number of items in the walk."""
        return len(self.edges) + 1

    def extend(self, edge: SequenceEdge, visitations: Visitations) -> Path:
        return Path(self.edges + (edge,), visitations)

    def edge_ids(self) -> list[int]:
        return [edge.id for edge in self.edges]

    def items(self) -> tuple[ItemId, ...]:
        """Item ids along the walk, shared endpoints listed once."""
        items: list[ItemId] = []
        previous: SequenceNode | None = None
        for edge in self.edges:
            if previous is None or edge.source.id != previous.id:
                items.append(edge.source.id)
            items.append(edge.destination.id)
            previous = edge.destination
        return tuple(items)

    def to_pattern(self) -> RepresentativePattern:
        return RepresentativePattern(
            items=self.items(),
            cover=self.visitations.cover,
            support=self.visitations.support,
        )


class GraspMiner:
    """Mine representative sequences from a sequence database.

    Each sequence is scanned for a supported, unclaimed edge that can be
    joined with a nearby edge; the resulting path is grown greedily while
    its support stays at or above ``min_support``. Paths with at least two
    edges are emitted and their edges claimed, so they never seed again.
    """

    def __init__(
        self,
        min_support: int = 2,
        max_gap: int = 1,
        missing_token_skip: int = 1,
        workers: int = 1,
    ) -> None:
        self.min_support = _clamp("min_support", min_support)
        self.max_gap = _clamp("max_gap", max_gap)
        self.missing_token_skip = max(0, missing_token_skip)
        self.workers = max(1, workers)

    @classmethod
    def from_config(cls, config: MiningConfig) -> GraspMiner:
        return cls(
            min_support=config.min_support,
            max_gap=config.max_gap,
            missing_token_skip=config.missing_token_skip,
            workers=config.workers,
        )

    def mine(self, sequences: SequenceDatabase) -> list[RepresentativePattern]:
        """Mine all patterns and return them in emission order."""
        sink = CollectingSink()
        self.mine_to(sequences, sink)
        return sink.patterns

    def mine_to_file(
        self,
        sequences: SequenceDatabase,
        out_path: FilePath,
        include_cover: bool = False,
    ) -> int:
        """Stream patterns to an SPMF pattern file as they are found."""
        from grasp.data.spmf import SPMFPatternWriter

        writer = SPMFPatternWriter(out_path, include_cover=include_cover)
        return self.mine_to(sequences, writer)

    def mine_to(self, sequences: SequenceDatabase, sink: PatternSink) -> int:
        """Mine every graph of ``sequences`` into ``sink`` and finish it."""
        try:
            logger.info("extracting_sequence_graphs", sequences=len(sequences))
            graphs = SequenceGraph.from_sequences(sequences)
            logger.info(
                "mining_patterns",
                graphs=len(graphs),
                min_support=self.min_support,
                max_gap=self.max_gap,
            )
            if self.workers > 1 and len(graphs) > 1:
                emitted = self._mine_concurrently(graphs, sequences, sink)
            else:
                emitted = sum(self.mine_graph(g, sequences, sink) for g in graphs)
        finally:
            sink.finish()

        logger.info("mining_complete", patterns=emitted)
        return emitted

    def _mine_concurrently(
        self,
        graphs: list[SequenceGraph],
        sequences: SequenceDatabase,
        sink: PatternSink,
    ) -> int:
        def run(graph: SequenceGraph) -> list[RepresentativePattern]:
            collected = CollectingSink()
            self.mine_graph(graph, sequences, collected)
            return collected.patterns

        emitted = 0
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            # map() yields in graph order, keeping output deterministic.
            for patterns in pool.map(run, graphs):
                for pattern in patterns:
                    sink.accept(pattern)
                emitted += len(patterns)
        return emitted

    def mine_graph(
        self,
        graph: SequenceGraph,
        sequences: SequenceDatabase,
        sink: PatternSink,
        claims: EdgeClaims | None = None,
    ) -> int:
        """Mine one transition graph; returns the number of patterns emitted."""
        if not graph.edges:
            return 0
        if claims is None:
            claims = EdgeClaims(graph.edge_count)

        log = logger.bind(nodes=len(graph.nodes), edges=graph.edge_count)
        log.debug("mining_graph")

        emitted = 0
        for sequence in sequences:
            if len(sequence) == 0:
                continue

            cursor = Cursor(sequence)
            while cursor.has_next():
                path = self._starting_path(graph, cursor, claims)
                if path is None:
                    break
                path = self._expand_path(path, graph, cursor.copy())

                # a single edge is not a pattern
                if path.size() > 2:
                    claims.claim(path.edge_ids())
                    pattern = path.to_pattern()
                    sink.accept(pattern)
                    emitted += 1
                    log.debug("pattern_emitted", items=pattern.items, support=pattern.support)

        log.debug("graph_mined", patterns=emitted, claimed_edges=claims.count)
        return emitted

    def _next_node(self, graph: SequenceGraph, cursor: Cursor) -> SequenceNode | None:
        while cursor.has_next():
            node = graph.get_node(cursor.next())
            if node is not None:
                return node
            # Tokens outside the graph come paired with a companion token.
            for _ in range(self.missing_token_skip):
                if not cursor.has_next():
                    break
                cursor.next()
        return None

    def _next_edge(self, graph: SequenceGraph, cursor: Cursor) -> SequenceEdge | None:
        """Advance to the next transition whose support meets the threshold."""
        while cursor.has_next():
            node = self._next_node(graph, cursor)
            if node is None or not cursor.has_next():
                return None
            edge = node.get_out_edge(cursor.peek())
            if edge is None or edge.support < self.min_support:
                continue
            return edge
        return None

    def _starting_path(
        self, graph: SequenceGraph, cursor: Cursor, claims: EdgeClaims
    ) -> Path | None:
        while cursor.has_next():
            seed = self._next_edge(graph, cursor)
            if seed is None:
                return None
            if claims.is_claimed(seed.id):
                continue

            lookahead = cursor.copy()
            for _ in range(self.max_gap):
                if not lookahead.has_next():
                    break
                partner = self._next_edge(graph, lookahead)
                if partner is None:
                    break
                merged = Visitations.try_connect(
                    seed.visitations, partner.visitations, self.max_gap, self.min_support
                )
                if merged.support < self.min_support:
                    continue
                cursor.set(lookahead)
                return Path((seed, partner), merged)
        return None

    def _expand_path(self, path: Path, graph: SequenceGraph, cursor: Cursor) -> Path:
        while cursor.has_next():
            edge = self._next_edge(graph, cursor)
            if edge is None:
                return path
            candidate = Visitations.try_connect(
                path.visitations, edge.visitations, self.max_gap, self.min_support
            )
            if candidate.support >= self.min_support:
                path = path.extend(edge, candidate.add_complement(path.visitations))
            elif candidate.support == 0:
                return path
        return path


def _clamp(name: str, value: int) -> int:
    if value >= 1:
        return value
    logger.warning("parameter_clamped", parameter=name, value=value, clamped_to=1)
    return 1
