"""Shared fixtures for the GRASP test suite."""

from __future__ import annotations

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo logging configuration applied by CLI commands."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def scenario_db() -> list[list[int]]:
    """Two identical walks plus a branch that only one sequence takes."""
    return [[1, 2, 3, 4], [1, 2, 3, 4], [1, 2, 5]]
