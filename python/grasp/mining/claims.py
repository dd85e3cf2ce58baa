"""Run-scoped record of edges already used by emitted patterns."""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import NDArray


class EdgeClaims:
    """One flag per edge id of a single graph."""

    __slots__ = ("_bits",)

    def __init__(self, edge_count: int) -> None:
        self._bits: NDArray[np.bool_] = np.zeros(edge_count, dtype=np.bool_)

    def is_claimed(self, edge_id: int) -> bool:
        return bool(self._bits[edge_id])

    def claim(self, edge_ids: Iterable[int]) -> None:
        ids = np.fromiter(edge_ids, dtype=np.int64)
        self._bits[ids] = True

    @property
    def count(self) -> int:
        return int(np.count_nonzero(self._bits))

    def claimed_ids(self) -> list[int]:
        return [int(i) for i in np.flatnonzero(self._bits)]

    def __len__(self) -> int:
        return len(self._bits)
