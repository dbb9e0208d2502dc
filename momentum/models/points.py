"""
Pydantic models for points and levels
"""
from datetime import date
from pydantic import BaseModel, Field
from typing import List, Optional


class LevelProgress(BaseModel):
    """Where a point total sits inside the level table"""
    current_level: int
    next_level: int
    points_in_level: int
    points_needed_for_next: int
    segments_filled: int


class LevelInfo(BaseModel):
    """One row of the level table"""
    level: int
    title: str
    min_points: int
    max_points: Optional[int] = None
    unlocks: str = ""
    rewards: List[str] = Field(default_factory=list)


class DailyPointsBreakdown(BaseModel):
    """Points earned on a single day"""
    daily: int = 0
    core: int = 0
    bonus: int = 0
    total: int = 0


class CoreHabitsStatus(BaseModel):
    liked: bool = False
    commented: bool = False
    shared: bool = False
    updated_goal: bool = False
    bonus: bool = False


class DailyHabitsRecord(BaseModel):
    """Request model for saving a day's habit log"""
    points_date: Optional[date] = Field(None, description="Defaults to the current points day")
    gym_day_type: Optional[str] = None
    gym_training_types: Optional[List[str]] = None
    sleep_hours: Optional[float] = None
    sleep_quality: Optional[int] = None
    water_intake: Optional[float] = None
    run_day_type: Optional[str] = None
    run_activity_type: Optional[str] = None
    reflect_mood: Optional[int] = None
    reflect_energy: Optional[int] = None
    reflect_what_went_well: Optional[str] = None
    cold_shower_completed: Optional[bool] = None


class TrackHabitRequest(BaseModel):
    """Request model for tracking a separately tracked daily habit or a core habit"""
    habit_type: str = Field(..., description="meditation, microlearn, like, comment, share or update_goal")
    points_date: Optional[date] = Field(None, description="Defaults to the current points day")
    is_active: Optional[bool] = Field(
        None, description="For like/comment: whether the user still has an active like/comment today"
    )
