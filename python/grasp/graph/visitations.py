"""Occurrence bookkeeping for edges and partially grown paths."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, Mapping, Sequence

from grasp.core.types import Occurrence


class Visitations:
    """Which sequences realize an edge or path, and where.

    Live occurrences are the spans a later merge may extend. Retained
    occurrences come from ``add_complement``: they count toward cover but
    are never extended again.
    """

    __slots__ = ("_live", "_retained")

    def __init__(
        self,
        live: Mapping[int, Sequence[Occurrence]] | None = None,
        retained: Mapping[int, Sequence[Occurrence]] | None = None,
    ) -> None:
        # Occurrences of one sequence are kept ordered by end position.
        self._live: dict[int, tuple[Occurrence, ...]] = {
            sid: _ordered(occs) for sid, occs in (live or {}).items() if occs
        }
        self._retained: dict[int, tuple[Occurrence, ...]] = {
            sid: _ordered(occs) for sid, occs in (retained or {}).items() if occs
        }

    @property
    def support(self) -> int:
        """Number of distinct sequences still represented."""
        return len(self._live)

    @property
    def cover(self) -> int:
        """Number of occurrence instances, live and retained."""
        live = sum(len(occs) for occs in self._live.values())
        retained = sum(len(occs) for occs in self._retained.values())
        return live + retained

    def sequence_ids(self) -> list[int]:
        return list(self._live)

    def occurrences(self, sequence_id: int) -> tuple[Occurrence, ...]:
        return self._live.get(sequence_id, ())

    def retained(self, sequence_id: int) -> tuple[Occurrence, ...]:
        return self._retained.get(sequence_id, ())

    def __iter__(self) -> Iterator[tuple[int, tuple[Occurrence, ...]]]:
        return iter(self._live.items())

    def __contains__(self, sequence_id: object) -> bool:
        return sequence_id in self._live

    def __bool__(self) -> bool:
        return bool(self._live)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Visitations):
            return NotImplemented
        return self._live == other._live and self._retained == other._retained

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Visitations(support={self.support}, cover={self.cover})"

    @classmethod
    def try_connect(
        cls,
        prefix: Visitations,
        following: Visitations,
        max_gap: int,
        min_sup: int,
    ) -> Visitations:
        """Merge a path's visitations with those of a candidate next edge.

        Each occurrence of ``following`` is aligned with the closest live
        occurrence of ``prefix`` that ends at or before its start, with at
        most ``max_gap`` unmatched items in between. A sequence with several
        alignments counts once toward support and once per alignment toward
        cover.

        Support is the exact number of sequences with an alignment. Callers
        compare it against ``min_sup``; the threshold does not alter it.
        """
        merged: dict[int, tuple[Occurrence, ...]] = {}
        for sid, heads in prefix._live.items():
            tails = following._live.get(sid)
            if tails is None:
                continue
            aligned = _align(heads, tails, max_gap)
            if aligned:
                merged[sid] = aligned
        return cls(merged)

    def add_complement(self, previous: Visitations) -> Visitations:
        """Return a copy that also retains unextended occurrences of ``previous``.

        Only sequences this instance already supports are considered, so
        support is unchanged while cover can grow.
        """
        retained: dict[int, tuple[Occurrence, ...]] = {}
        for sid, occs in self._live.items():
            kept = list(previous._retained.get(sid, ()))
            kept.extend(
                prev for prev in previous._live.get(sid, ())
                if not any(_contains(occ, prev) for occ in occs)
            )
            kept.extend(self._retained.get(sid, ()))
            if kept:
                retained[sid] = tuple(kept)
        return Visitations(self._live, retained)


def _ordered(occurrences: Sequence[Occurrence]) -> tuple[Occurrence, ...]:
    return tuple(sorted(occurrences, key=lambda occ: (occ.end, occ.start)))


def _contains(outer: Occurrence, inner: Occurrence) -> bool:
    return outer.start <= inner.start and inner.end <= outer.end


def _align(
    heads: tuple[Occurrence, ...],
    tails: tuple[Occurrence, ...],
    max_gap: int,
) -> tuple[Occurrence, ...]:
    ends = [head.end for head in heads]
    aligned: list[Occurrence] = []
    for tail in tails:
        i = bisect_right(ends, tail.start) - 1
        if i < 0:
            continue
        head = heads[i]
        if tail.start - head.end - 1 > max_gap:
            continue
        aligned.append(Occurrence(head.start, tail.end))
    return tuple(aligned)
