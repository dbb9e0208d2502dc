#!/usr/bin/env python3
"""
Unit tests for momentum/services/goals/service.py
Repository calls are patched so no Supabase connection is needed.
"""

from datetime import date
from unittest.mock import patch

import pytest

from momentum.core.exceptions import (
    CheckInNotFoundError,
    DuplicateCheckInError,
    GoalNotFoundError,
    InvalidCheckInError,
    InvalidGoalDataError,
)
from momentum.services.goals import service
from tests.conftest import EVERY_DAY, SUNDAY_ONLY

TODAY = date(2024, 1, 22)
REPO = 'momentum.services.goals.service.repository'


def goal_row(goal_id="g1", frequency=SUNDAY_ONLY, start_date="2024-01-01", **kwargs):
    row = {
        "id": goal_id,
        "user_id": "u1",
        "title": f"Goal {goal_id}",
        "frequency": frequency,
        "start_date": start_date,
        "end_date": None,
        "completed": False,
        "created_at": "2023-12-31T18:30:00+00:00",
    }
    row.update(kwargs)
    return row


class TestGoalCrud:
    """Test goal create/update/delete/toggle."""

    def test_create_goal_defaults_start_to_today(self):
        with patch(f'{REPO}.create_goal') as mock_create, \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            mock_create.return_value = {"id": "g1"}

            result = service.create_goal("u1", "Run", EVERY_DAY)

            sent = mock_create.call_args[0][0]
            assert sent["start_date"] == "2024-01-22"
            assert sent["frequency"] == EVERY_DAY
            assert "end_date" not in sent
            assert result["status"] == "success"

    def test_create_goal_rejects_end_before_start(self):
        with patch(f'{REPO}.create_goal') as mock_create:
            with pytest.raises(InvalidGoalDataError):
                service.create_goal("u1", "Run", EVERY_DAY,
                                    start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))
            mock_create.assert_not_called()

    def test_update_missing_goal(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=None):
            with pytest.raises(GoalNotFoundError):
                service.update_goal("missing", {"title": "x"})

    def test_update_serialises_dates_and_drops_none(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch(f'{REPO}.update_goal') as mock_update:
            mock_update.return_value = {"id": "g1"}

            service.update_goal("g1", {"end_date": date(2024, 3, 1), "title": None})

            mock_update.assert_called_once_with("g1", {"end_date": "2024-03-01"})

    def test_update_with_nothing_to_change(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()):
            with pytest.raises(InvalidGoalDataError):
                service.update_goal("g1", {"title": None})

    def test_toggle_completion(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row(completed=False)), \
             patch(f'{REPO}.update_goal') as mock_update:
            service.toggle_goal_completion("g1")
            mock_update.assert_called_once_with("g1", {"completed": True})

    def test_delete_goal(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch(f'{REPO}.delete_goal') as mock_delete:
            result = service.delete_goal("g1")
            mock_delete.assert_called_once_with("g1")
            assert result["goal_id"] == "g1"


class TestCheckIn:
    """Test recording and deleting check-ins."""

    def test_check_in_defaults_to_today(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch(f'{REPO}.has_check_in', return_value=False), \
             patch(f'{REPO}.create_check_in') as mock_create, \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            mock_create.return_value = {"id": "c1"}

            result = service.check_in("g1", "u1")

            mock_create.assert_called_once_with("u1", "g1", TODAY, None, None)
            assert result["data"] == {"id": "c1"}

    def test_check_in_for_missed_day(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch(f'{REPO}.has_check_in', return_value=False), \
             patch(f'{REPO}.create_check_in') as mock_create, \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            service.check_in("g1", "u1", check_in_date=date(2024, 1, 7), note="late")
            mock_create.assert_called_once_with("u1", "g1", date(2024, 1, 7), None, "late")

    def test_duplicate_check_in(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch(f'{REPO}.has_check_in', return_value=True), \
             patch(f'{REPO}.create_check_in') as mock_create, \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            with pytest.raises(DuplicateCheckInError):
                service.check_in("g1", "u1")
            mock_create.assert_not_called()

    def test_future_check_in(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row()), \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            with pytest.raises(InvalidCheckInError):
                service.check_in("g1", "u1", check_in_date=date(2024, 1, 23))

    def test_check_in_unknown_goal(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=None):
            with pytest.raises(GoalNotFoundError):
                service.check_in("nope", "u1")

    def test_check_in_on_another_users_goal(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row(user_id="u2")), \
             patch(f'{REPO}.create_check_in') as mock_create, \
             patch('momentum.services.goals.service.get_local_today_date', return_value=TODAY):
            with pytest.raises(GoalNotFoundError):
                service.check_in("g1", "u1")
            mock_create.assert_not_called()

    def test_delete_missing_check_in(self):
        with patch(f'{REPO}.get_check_in_by_id', return_value=None):
            with pytest.raises(CheckInNotFoundError):
                service.delete_check_in("c1")


class TestCheckInSummary:
    """Test assembling the pending check-in list from stored rows."""

    def test_summary(self):
        goals = [
            goal_row("sundays", frequency=SUNDAY_ONLY),
            goal_row("daily", frequency=EVERY_DAY, start_date="2024-01-22"),
            goal_row("done", frequency=EVERY_DAY, completed=True),
            goal_row("none", frequency=[False] * 7),
        ]
        check_ins = [{"goal_id": "sundays", "check_in_date": "2024-01-14"}]

        with patch(f'{REPO}.get_goals_for_user', return_value=goals), \
             patch(f'{REPO}.get_check_ins_for_goals_in_range', return_value=check_ins) as mock_range:
            summary = service.get_check_in_summary("u1", TODAY)

            user_id, goal_ids, start, end = mock_range.call_args[0]
            assert goal_ids == ["sundays", "daily"]
            assert start == date(2024, 1, 1)
            assert end == TODAY

        assert summary["date"] == "2024-01-22"
        assert summary["overdue_count"] == 1
        assert summary["due_today_count"] == 1

        overdue = summary["items"][0]
        assert overdue["goal"]["id"] == "sundays"
        assert overdue["count"] == 2
        assert overdue["oldest_missed_date"] == "2024-01-07"
        assert overdue["days_since_oldest"] == 15
        assert summary["items"][1]["goal"]["id"] == "daily"

    def test_summary_skips_invalid_goal_rows(self):
        goals = [
            goal_row("broken", frequency=[True, False, True]),
            goal_row("sundays", frequency=SUNDAY_ONLY),
        ]
        with patch(f'{REPO}.get_goals_for_user', return_value=goals), \
             patch(f'{REPO}.get_check_ins_for_goals_in_range', return_value=[]) as mock_range:
            summary = service.get_check_in_summary("u1", TODAY)

            assert mock_range.call_args[0][1] == ["sundays"]
        assert [item["goal"]["id"] for item in summary["items"]] == ["sundays"]
        assert summary["items"][0]["count"] == 3

    def test_summary_without_goals(self):
        with patch(f'{REPO}.get_goals_for_user', return_value=[]), \
             patch(f'{REPO}.get_check_ins_for_goals_in_range') as mock_range:
            summary = service.get_check_in_summary("u1", TODAY)
            mock_range.assert_not_called()
        assert summary["items"] == []


class TestGoalProgress:
    """Test per-goal progress figures."""

    def test_progress(self):
        row = goal_row(frequency=EVERY_DAY, start_date="2024-01-15", end_date="2024-01-28")
        check_ins = [
            {"id": str(i), "goal_id": "g1", "check_in_date": f"2024-01-{d}"}
            for i, d in enumerate((15, 16, 17, 20, 21))
        ]
        with patch(f'{REPO}.get_goal_by_id', return_value=row), \
             patch(f'{REPO}.get_check_ins_for_goal', return_value=check_ins):
            progress = service.get_goal_progress("g1", "u1", TODAY)

        assert progress["total_sessions"] == 14
        assert progress["check_in_count"] == 5
        assert progress["completion_percentage"] == 36
        assert progress["current_streak"] == 2
        assert progress["longest_streak"] == 3
        assert progress["overdue_count"] == 2
        assert progress["days_until_target"] == 6
        assert progress["target_status"] == "6 days left"

    def test_progress_on_another_users_goal(self):
        with patch(f'{REPO}.get_goal_by_id', return_value=goal_row(user_id="u2")), \
             patch(f'{REPO}.get_check_ins_for_goal') as mock_check_ins:
            with pytest.raises(GoalNotFoundError):
                service.get_goal_progress("g1", "u1", TODAY)
            mock_check_ins.assert_not_called()
