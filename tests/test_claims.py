"""Tests for the edge-claim bitset."""

from __future__ import annotations

from grasp.mining.claims import EdgeClaims


class TestEdgeClaims:
    def test_starts_unclaimed(self):
        claims = EdgeClaims(4)
        assert len(claims) == 4
        assert claims.count == 0
        assert not any(claims.is_claimed(i) for i in range(4))

    def test_claim_marks_ids(self):
        claims = EdgeClaims(5)
        claims.claim([1, 3])
        assert claims.is_claimed(1)
        assert claims.is_claimed(3)
        assert not claims.is_claimed(0)
        assert claims.claimed_ids() == [1, 3]

    def test_claim_is_idempotent(self):
        claims = EdgeClaims(3)
        claims.claim([2])
        claims.claim([2, 0])
        assert claims.count == 2

    def test_claim_nothing(self):
        claims = EdgeClaims(3)
        claims.claim([])
        assert claims.count == 0
