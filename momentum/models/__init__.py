"""
Pydantic models for the application
"""
from momentum.models.goal import (
    Goal,
    CheckIn,
    OverdueStatus,
    CreateGoalRequest,
    UpdateGoalRequest,
    CheckInRequest
)
from momentum.models.points import (
    LevelProgress,
    LevelInfo,
    DailyPointsBreakdown,
    CoreHabitsStatus,
    DailyHabitsRecord,
    TrackHabitRequest
)

__all__ = [
    "Goal",
    "CheckIn",
    "OverdueStatus",
    "CreateGoalRequest",
    "UpdateGoalRequest",
    "CheckInRequest",
    "LevelProgress",
    "LevelInfo",
    "DailyPointsBreakdown",
    "CoreHabitsStatus",
    "DailyHabitsRecord",
    "TrackHabitRequest"
]
