"""Tests for the sequence cursor."""

from __future__ import annotations

import numpy as np
import pytest

from grasp.graph.cursor import Cursor


class TestCursor:
    def test_next_consumes_in_order(self):
        cursor = Cursor([4, 5, 6])
        assert cursor.next() == 4
        assert cursor.next() == 5
        assert cursor.next() == 6
        assert not cursor.has_next()

    def test_next_past_end_raises(self):
        cursor = Cursor([1])
        cursor.next()
        with pytest.raises(IndexError):
            cursor.next()

    def test_exhausted_cursor_inside_generator(self):
        cursor = Cursor([1])

        def drain():
            while True:
                yield cursor.next()

        with pytest.raises(IndexError):
            list(drain())

    def test_builtin_next_stops_at_end(self):
        cursor = Cursor([])
        assert next(cursor, None) is None

    def test_peek_does_not_consume(self):
        cursor = Cursor([7, 8])
        assert cursor.peek() == 7
        assert cursor.peek() == 7
        assert cursor.index == 0
        assert cursor.next() == 7
        assert cursor.peek() == 8

    def test_peek_past_end_raises(self):
        cursor = Cursor([])
        with pytest.raises(IndexError):
            cursor.peek()

    def test_copy_advances_independently(self):
        cursor = Cursor([1, 2, 3])
        cursor.next()
        lookahead = cursor.copy()
        lookahead.next()
        lookahead.next()
        assert cursor.index == 1
        assert lookahead.index == 3
        assert not lookahead.has_next()
        assert cursor.peek() == 2

    def test_set_commits_lookahead(self):
        cursor = Cursor([1, 2, 3])
        lookahead = cursor.copy()
        lookahead.next()
        lookahead.next()
        cursor.set(lookahead)
        assert cursor.index == 2
        assert cursor.next() == 3

    def test_set_rejects_other_sequence(self):
        with pytest.raises(ValueError):
            Cursor([1, 2]).set(Cursor([1, 2]))

    def test_iterates_remaining_items(self):
        cursor = Cursor([1, 2, 3, 4])
        cursor.next()
        assert list(cursor) == [2, 3, 4]

    def test_numpy_backing_sequence(self):
        cursor = Cursor(np.array([3, 1], dtype=np.int64))
        assert cursor.next() == 3
        assert cursor.peek() == 1
