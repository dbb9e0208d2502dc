#!/usr/bin/env python3
"""
Pytest configuration and fixtures for Momentum tests.
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from momentum.models.goal import CheckIn, Goal
from momentum.utils import cache

SUNDAY_ONLY = [True, False, False, False, False, False, False]
WEEKDAYS = [False, True, True, True, True, True, False]
EVERY_DAY = [True] * 7


@pytest.fixture(autouse=True)
def clear_cache():
    """Start and finish every test with an empty cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_goal():
    """Factory for Goal models with sensible defaults."""
    def _make_goal(goal_id="g1", frequency=None, start_date=date(2024, 1, 1), **kwargs):
        return Goal(
            id=goal_id,
            title=kwargs.pop("title", f"Goal {goal_id}"),
            frequency_mask=SUNDAY_ONLY if frequency is None else frequency,
            start_date=start_date,
            **kwargs
        )
    return _make_goal


@pytest.fixture
def make_check_in():
    """Factory for CheckIn models."""
    def _make_check_in(goal_id, check_in_date):
        return CheckIn(goal_id=goal_id, check_in_date=check_in_date)
    return _make_check_in


@pytest.fixture
def mock_supabase():
    """
    Supabase client whose query builder chains back to itself.

    Set mock_supabase.execute_result.data to control what execute() returns.
    """
    client = MagicMock()
    query = MagicMock()
    for method in ("select", "eq", "in_", "gte", "lte", "order", "limit", "insert", "update", "delete"):
        getattr(query, method).return_value = query
    result = MagicMock()
    result.data = []
    query.execute.return_value = result
    client.table.return_value = query
    client.query = query
    client.execute_result = result
    return client
