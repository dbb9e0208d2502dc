"""
Points Service - Daily points ledger, bonus awards and level lookups

Each user has one user_points_daily row per points day. Daily habits are
worth DAILY_HABIT_POINTS each; core (social) habits have their own values;
a one-off bonus is added once every daily and core habit is done.
"""
from datetime import date
from typing import Optional, Dict, Any
import logging

from momentum.core.constants import (
    DAILY_HABITS,
    DAILY_HABIT_POINTS,
    SEPARATELY_TRACKED_HABITS,
    CORE_HABIT_FIELDS,
    CORE_HABIT_POINTS,
    BONUS_POINTS,
    LEVEL_THRESHOLDS,
    TOTAL_POINTS_CACHE_PREFIX
)
from momentum.core.exceptions import InvalidPointsDataError
from momentum.models.points import CoreHabitsStatus, DailyPointsBreakdown
from momentum.utils import cache
from momentum.utils.timezone import get_points_date
from . import levels
from . import repository

logger = logging.getLogger(__name__)


def _completed_field(habit: str) -> str:
    return f"{habit}_completed"


def _habit_completions(daily_habits: Dict[str, Any]) -> Dict[str, bool]:
    """Which of the logged daily habits count as done"""
    return {
        "gym_completed": bool(daily_habits.get("gym_day_type") or daily_habits.get("gym_training_types")),
        "sleep_completed": bool(daily_habits.get("sleep_hours") or daily_habits.get("sleep_quality")),
        "water_completed": bool(daily_habits.get("water_intake")),
        "run_completed": bool(daily_habits.get("run_day_type") or daily_habits.get("run_activity_type")),
        "reflect_completed": bool(
            daily_habits.get("reflect_mood")
            or daily_habits.get("reflect_energy")
            or daily_habits.get("reflect_what_went_well")
        ),
        "cold_shower_completed": bool(daily_habits.get("cold_shower_completed")),
    }


def calculate_daily_habits_points(daily_habits: Dict[str, Any]) -> int:
    """
    Score a daily-habits log

    Meditation and microlearn are not part of the log and are tracked
    through track_daily_habit instead.
    """
    return sum(DAILY_HABIT_POINTS for done in _habit_completions(daily_habits).values() if done)


def _total_for(record: Optional[Dict[str, Any]], **overrides: int) -> int:
    record = record or {}
    parts = {
        "daily_habits_points": record.get("daily_habits_points") or 0,
        "core_habits_points": record.get("core_habits_points") or 0,
        "bonus_points": record.get("bonus_points") or 0,
    }
    parts.update(overrides)
    return sum(parts.values())


def _invalidate_total(user_id: str) -> None:
    cache.invalidate(f"{TOTAL_POINTS_CACHE_PREFIX}{user_id}")


def save_daily_habits(user_id: str, daily_habits: Dict[str, Any],
                      points_date: Optional[date] = None) -> Dict[str, Any]:
    """
    Recalculate a day's daily-habit points from a saved habit log

    Separately tracked habits keep whatever the existing row says.

    Returns:
        Dict with status, the day's daily_habits_points and total
    """
    points_date = points_date or get_points_date()
    existing = repository.get_daily_record(user_id, points_date)

    completions = _habit_completions(daily_habits)
    for habit in SEPARATELY_TRACKED_HABITS:
        completions[_completed_field(habit)] = bool((existing or {}).get(_completed_field(habit)))

    daily_points = sum(DAILY_HABIT_POINTS for done in completions.values() if done)
    update_data = {
        **completions,
        "daily_habits_points": daily_points,
        "total_points_today": _total_for(existing, daily_habits_points=daily_points)
    }
    repository.upsert_daily_record(user_id, points_date, update_data, exists=existing is not None)
    _invalidate_total(user_id)

    bonus_awarded = check_and_award_bonus(user_id, points_date)
    return {
        "status": "success",
        "date": points_date.isoformat(),
        "daily_habits_points": daily_points,
        "total_points_today": update_data["total_points_today"] + (BONUS_POINTS if bonus_awarded else 0),
        "bonus_awarded": bonus_awarded
    }


def track_daily_habit(user_id: str, habit_type: str, points_date: Optional[date] = None) -> Dict[str, Any]:
    """
    Record a separately tracked daily habit (meditation or microlearn)

    Returns:
        Dict with status and whether points were awarded; a habit already
        completed for the day awards nothing

    Raises:
        InvalidPointsDataError: If habit_type is not separately tracked
    """
    if habit_type not in SEPARATELY_TRACKED_HABITS:
        raise InvalidPointsDataError(f"Unknown daily habit '{habit_type}'")

    points_date = points_date or get_points_date()
    existing = repository.get_daily_record(user_id, points_date)
    field = _completed_field(habit_type)

    if existing and existing.get(field):
        return {"status": "success", "awarded": False, "message": f"{habit_type} already completed today"}

    daily_points = ((existing or {}).get("daily_habits_points") or 0) + DAILY_HABIT_POINTS
    update_data = {
        field: True,
        "daily_habits_points": daily_points,
        "total_points_today": _total_for(existing, daily_habits_points=daily_points)
    }
    repository.upsert_daily_record(user_id, points_date, update_data, exists=existing is not None)
    _invalidate_total(user_id)

    check_and_award_bonus(user_id, points_date)
    return {"status": "success", "awarded": True, "points": DAILY_HABIT_POINTS}


def update_core_habit_status(user_id: str, habit_type: str, is_active: bool,
                             points_date: Optional[date] = None) -> Dict[str, Any]:
    """
    Sync a state-based core habit (like or comment) with whether it is active

    Points are added when the status turns on and removed when it turns off;
    core points never drop below zero.

    Raises:
        InvalidPointsDataError: If habit_type is not like or comment
    """
    if habit_type not in ("like", "comment"):
        raise InvalidPointsDataError(f"'{habit_type}' is not a state-based core habit")

    points_date = points_date or get_points_date()
    existing = repository.get_daily_record(user_id, points_date)
    field = CORE_HABIT_FIELDS[habit_type]
    was_active = bool((existing or {}).get(field))

    if is_active == was_active:
        return {"status": "success", "changed": False}

    core_points = (existing or {}).get("core_habits_points") or 0
    core_points += CORE_HABIT_POINTS[habit_type] if is_active else -CORE_HABIT_POINTS[habit_type]
    core_points = max(0, core_points)

    update_data = {
        field: is_active,
        "core_habits_points": core_points,
        "total_points_today": _total_for(existing, core_habits_points=core_points)
    }
    repository.upsert_daily_record(user_id, points_date, update_data, exists=existing is not None)
    _invalidate_total(user_id)

    check_and_award_bonus(user_id, points_date)
    return {"status": "success", "changed": True, "core_habits_points": core_points}


def track_core_habit(user_id: str, habit_type: str, points_date: Optional[date] = None,
                     is_active: Optional[bool] = None) -> Dict[str, Any]:
    """
    Record a core habit

    Likes and comments are state based and delegate to update_core_habit_status.
    A share counts once per day; every goal update earns points.

    Raises:
        InvalidPointsDataError: If habit_type is not a core habit
    """
    if habit_type not in CORE_HABIT_FIELDS:
        raise InvalidPointsDataError(f"Unknown core habit '{habit_type}'")

    if habit_type in ("like", "comment"):
        return update_core_habit_status(
            user_id, habit_type, True if is_active is None else is_active, points_date
        )

    points_date = points_date or get_points_date()
    existing = repository.get_daily_record(user_id, points_date)
    field = CORE_HABIT_FIELDS[habit_type]

    if habit_type == "share" and existing and existing.get(field):
        return {"status": "success", "awarded": False, "message": "Already shared today"}

    core_points = ((existing or {}).get("core_habits_points") or 0) + CORE_HABIT_POINTS[habit_type]
    update_data = {
        field: True,
        "core_habits_points": core_points,
        "total_points_today": _total_for(existing, core_habits_points=core_points)
    }
    repository.upsert_daily_record(user_id, points_date, update_data, exists=existing is not None)
    _invalidate_total(user_id)

    check_and_award_bonus(user_id, points_date)
    return {"status": "success", "awarded": True, "points": CORE_HABIT_POINTS[habit_type]}


def track_habit(user_id: str, habit_type: str, points_date: Optional[date] = None,
                is_active: Optional[bool] = None) -> Dict[str, Any]:
    """Route a habit event to the daily or core tracker"""
    if habit_type in SEPARATELY_TRACKED_HABITS:
        return track_daily_habit(user_id, habit_type, points_date)
    if habit_type in CORE_HABIT_FIELDS:
        return track_core_habit(user_id, habit_type, points_date, is_active)
    raise InvalidPointsDataError(f"Unknown habit type '{habit_type}'")


def check_and_award_bonus(user_id: str, points_date: date) -> bool:
    """
    Award the bonus once every daily and core habit is done for the day

    Returns:
        True if the bonus was awarded by this call
    """
    record = repository.get_daily_record(user_id, points_date)
    if not record:
        return False

    if (record.get("bonus_points") or 0) > 0:
        return False

    all_daily_done = all(record.get(_completed_field(habit)) for habit in DAILY_HABITS)
    all_core_done = all(record.get(field) for field in CORE_HABIT_FIELDS.values())
    if not (all_daily_done and all_core_done):
        return False

    repository.upsert_daily_record(user_id, points_date, {
        "bonus_points": BONUS_POINTS,
        "total_points_today": (record.get("total_points_today") or 0) + BONUS_POINTS
    }, exists=True)
    _invalidate_total(user_id)

    logger.info(f"Bonus awarded to user {user_id} for {points_date.isoformat()}")
    return True


def get_todays_points(user_id: str, points_date: Optional[date] = None) -> DailyPointsBreakdown:
    """Get the points breakdown for the current points day"""
    points_date = points_date or get_points_date()
    record = repository.get_daily_record(user_id, points_date)
    if not record:
        return DailyPointsBreakdown()

    return DailyPointsBreakdown(
        daily=record.get("daily_habits_points") or 0,
        core=record.get("core_habits_points") or 0,
        bonus=record.get("bonus_points") or 0,
        total=record.get("total_points_today") or 0
    )


def get_core_habits_status(user_id: str, points_date: Optional[date] = None) -> CoreHabitsStatus:
    """Get which core habits are done for the current points day"""
    points_date = points_date or get_points_date()
    record = repository.get_daily_record(user_id, points_date)
    if not record:
        return CoreHabitsStatus()

    return CoreHabitsStatus(
        liked=bool(record.get("liked_today")),
        commented=bool(record.get("commented_today")),
        shared=bool(record.get("shared_today")),
        updated_goal=bool(record.get("updated_goal_today")),
        bonus=(record.get("bonus_points") or 0) > 0
    )


def get_total_points(user_id: str) -> int:
    """
    Get a user's cumulative points, summed from their daily rows

    The sum is cached until the user's points next change.
    """
    cache_key = f"{TOTAL_POINTS_CACHE_PREFIX}{user_id}"
    cached = cache.get_cached(cache_key)
    if cached is not None:
        return cached

    total = sum(row.get("total_points_today") or 0 for row in repository.get_daily_totals(user_id))
    cache.set_cached(cache_key, total)
    return total


def get_level_summary(user_id: str) -> Dict[str, Any]:
    """
    Get a user's total points, level progress and level details
    """
    total_points = get_total_points(user_id)
    progress = levels.level_progress(total_points, LEVEL_THRESHOLDS)
    info = levels.get_level_info(progress.current_level)

    return {
        "user_id": user_id,
        "total_points": total_points,
        "progress": progress.model_dump(),
        "level": info.model_dump()
    }
