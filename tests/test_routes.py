#!/usr/bin/env python3
"""
Route tests for the FastAPI app.
Service functions are patched; the lifespan (scheduler) is not started.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from momentum.core.exceptions import (
    DatabaseError,
    DuplicateCheckInError,
    GoalNotFoundError,
    InvalidPointsDataError,
)


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealthRoutes:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestGoalRoutes:
    """Test goal and check-in endpoints."""

    def test_create_goal(self, client):
        with patch('momentum.services.goals.create_goal') as mock_create:
            mock_create.return_value = {"status": "success", "data": {"id": "g1"}}
            response = client.post("/goals", json={
                "user_id": "u1",
                "title": "Read",
                "frequency": [True, False, False, False, False, False, False],
            })
        assert response.status_code == 200
        assert mock_create.call_args[0][:2] == ("u1", "Read")

    def test_create_goal_rejects_bad_mask(self, client):
        response = client.post("/goals", json={"user_id": "u1", "title": "Read", "frequency": [True, False]})
        assert response.status_code == 422

    def test_check_in_summary(self, client):
        with patch('momentum.services.goals.get_check_in_summary') as mock_summary:
            mock_summary.return_value = {"date": "2024-01-22", "items": []}
            response = client.get("/goals/check-ins", params={"user_id": "u1", "today": "2024-01-22"})
        assert response.status_code == 200
        assert str(mock_summary.call_args[0][1]) == "2024-01-22"

    def test_duplicate_check_in_conflict(self, client):
        with patch('momentum.services.goals.check_in', side_effect=DuplicateCheckInError("Already checked in")):
            response = client.post("/goals/g1/check-ins", json={"user_id": "u1"})
        assert response.status_code == 409

    def test_missing_goal_404(self, client):
        with patch('momentum.services.goals.get_goal_progress', side_effect=GoalNotFoundError("Goal g1 not found")):
            response = client.get("/goals/g1/progress", params={"user_id": "u1"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Goal g1 not found"

    def test_database_error_500(self, client):
        with patch('momentum.services.goals.list_goals', side_effect=DatabaseError("down")):
            response = client.get("/goals", params={"user_id": "u1"})
        assert response.status_code == 500


class TestPointsRoutes:
    """Test points and level endpoints."""

    def test_level_table(self, client):
        response = client.get("/points/levels")
        assert response.status_code == 200
        assert len(response.json()["levels"]) == 8

    def test_level_progress(self, client):
        response = client.get("/points/levels/progress", params={"total_points": 1500})
        assert response.status_code == 200
        body = response.json()
        assert body["current_level"] == 2
        assert body["points_in_level"] == 100

    def test_track_unknown_habit(self, client):
        with patch('momentum.services.points.track_habit', side_effect=InvalidPointsDataError("Unknown habit type")):
            response = client.post("/points/u1/track", json={"habit_type": "juggling"})
        assert response.status_code == 400

    def test_daily_habits_passes_log_without_date(self, client):
        with patch('momentum.services.points.save_daily_habits') as mock_save:
            mock_save.return_value = {"status": "success"}
            response = client.post("/points/u1/daily-habits", json={"water_intake": 2, "points_date": "2024-01-22"})
        assert response.status_code == 200
        user_id, log, points_date = mock_save.call_args[0]
        assert log["water_intake"] == 2
        assert "points_date" not in log
        assert str(points_date) == "2024-01-22"
