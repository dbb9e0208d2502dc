"""
Goals Service - Business logic for goals and check-ins
Handles goal CRUD, recording check-ins and building the pending check-in list
"""
from datetime import date
from typing import Optional, Dict, Any, List
import logging

from pydantic import ValidationError

from momentum.core.exceptions import (
    GoalNotFoundError,
    InvalidGoalDataError,
    CheckInNotFoundError,
    DuplicateCheckInError,
    InvalidCheckInError
)
from momentum.models.goal import Goal, CheckIn
from momentum.utils.timezone import get_local_today_date
from . import repository
from . import schedule

logger = logging.getLogger(__name__)


def _to_goal(row: Dict[str, Any]) -> Goal:
    return Goal.model_validate(row)


def _valid_goals(rows: List[Dict[str, Any]]) -> List[Goal]:
    goals = []
    for row in rows:
        try:
            goals.append(_to_goal(row))
        except ValidationError as e:
            logger.warning(f"Skipping invalid goal {row.get('id')}: {e.error_count()} validation error(s)")
    return goals


def _require_goal(goal_id: str, user_id: Optional[str] = None) -> Dict[str, Any]:
    goal = repository.get_goal_by_id(goal_id)
    # Another user's goal is reported the same as a missing one
    if not goal or (user_id is not None and str(goal.get("user_id")) != str(user_id)):
        raise GoalNotFoundError(f"Goal {goal_id} not found")
    return goal


def list_goals(user_id: str) -> Dict[str, Any]:
    """
    Get all goals for a user, newest first

    Returns:
        Dict with status and goal list
    """
    goals = _valid_goals(repository.get_goals_for_user(user_id))
    return {
        "status": "success",
        "data": [goal.model_dump(mode="json") for goal in goals]
    }


def create_goal(user_id: str, title: str, frequency: List[bool],
                description: Optional[str] = None, category: Optional[str] = None,
                start_date: Optional[date] = None, end_date: Optional[date] = None) -> Dict[str, Any]:
    """
    Create a goal; start_date defaults to today

    Raises:
        InvalidGoalDataError: If the end date falls before the start date
        DatabaseError: If database operation fails
    """
    start_date = start_date or get_local_today_date()
    if end_date and end_date < start_date:
        raise InvalidGoalDataError(
            f"End date {end_date.isoformat()} is before start date {start_date.isoformat()}"
        )

    goal_data = {
        "user_id": user_id,
        "title": title,
        "frequency": list(frequency),
        "start_date": start_date.isoformat(),
        "completed": False
    }
    if description:
        goal_data["description"] = description
    if category:
        goal_data["category"] = category
    if end_date:
        goal_data["end_date"] = end_date.isoformat()

    created = repository.create_goal(goal_data)
    logger.info(f"Created goal '{title}' for user {user_id}")

    return {
        "status": "success",
        "message": f"Goal '{title}' created",
        "data": created
    }


def update_goal(goal_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update the provided fields of a goal

    Raises:
        GoalNotFoundError: If the goal does not exist
        InvalidGoalDataError: If there is nothing to update
    """
    _require_goal(goal_id)

    update_data = {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in updates.items()
        if value is not None
    }
    if not update_data:
        raise InvalidGoalDataError("No fields provided to update")

    updated = repository.update_goal(goal_id, update_data)
    return {
        "status": "success",
        "message": "Goal updated",
        "data": updated
    }


def delete_goal(goal_id: str) -> Dict[str, Any]:
    """
    Delete a goal

    Raises:
        GoalNotFoundError: If the goal does not exist
    """
    goal = _require_goal(goal_id)
    repository.delete_goal(goal_id)
    return {
        "status": "success",
        "message": f"Goal '{goal.get('title', goal_id)}' deleted",
        "goal_id": goal_id
    }


def toggle_goal_completion(goal_id: str) -> Dict[str, Any]:
    """
    Flip a goal between completed and active

    Raises:
        GoalNotFoundError: If the goal does not exist
    """
    goal = _require_goal(goal_id)
    completed = not goal.get("completed", False)
    updated = repository.update_goal(goal_id, {"completed": completed})
    return {
        "status": "success",
        "message": f"Goal marked {'completed' if completed else 'active'}",
        "data": updated
    }


def check_in(goal_id: str, user_id: str, check_in_date: Optional[date] = None,
             photo_url: Optional[str] = None, note: Optional[str] = None) -> Dict[str, Any]:
    """
    Record a check-in for a goal, for today or a missed earlier day

    Args:
        goal_id: The goal ID
        user_id: The user ID
        check_in_date: Day the check-in counts for (defaults to today)
        photo_url: Optional progress photo URL
        note: Optional note

    Returns:
        Dict with status, message, and created check-in data

    Raises:
        GoalNotFoundError: If the goal does not exist or belongs to another user
        InvalidCheckInError: If the date is in the future
        DuplicateCheckInError: If the goal already has a check-in for that date
        DatabaseError: If database operation fails
    """
    _require_goal(goal_id, user_id)

    today = get_local_today_date()
    check_in_date = check_in_date or today
    if check_in_date > today:
        raise InvalidCheckInError(f"Cannot check in for a future date: {check_in_date.isoformat()}")

    if repository.has_check_in(goal_id, user_id, check_in_date):
        raise DuplicateCheckInError(f"Already checked in on {check_in_date.isoformat()}")

    created = repository.create_check_in(user_id, goal_id, check_in_date, photo_url, note)
    logger.info(f"Check-in recorded for goal {goal_id} on {check_in_date.isoformat()}")

    return {
        "status": "success",
        "message": f"Checked in for {check_in_date.isoformat()}",
        "data": created
    }


def delete_check_in(check_in_id: str) -> Dict[str, Any]:
    """
    Delete a check-in

    Raises:
        CheckInNotFoundError: If the check-in does not exist
    """
    existing = repository.get_check_in_by_id(check_in_id)
    if not existing:
        raise CheckInNotFoundError(f"Check-in {check_in_id} not found")

    repository.delete_check_in(check_in_id)
    return {
        "status": "success",
        "message": "Check-in deleted",
        "check_in_id": check_in_id
    }


def get_check_in_summary(user_id: str, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Get the pending check-ins for a user: overdue first, then due today

    Check-ins for every goal are loaded with one range query covering the
    earliest goal window through today.

    Returns:
        Dict with date, items, overdue_count and due_today_count
    """
    today = today or get_local_today_date()
    goals = _valid_goals(repository.get_goals_for_user(user_id))
    active_goals = [g for g in goals if not g.completed and g.has_frequency]

    check_ins: List[CheckIn] = []
    window_starts = [
        window[0]
        for window in (schedule.overdue_range(g, today) for g in active_goals)
        if window is not None
    ]
    if active_goals:
        range_start = min(window_starts + [today])
        rows = repository.get_check_ins_for_goals_in_range(
            user_id, [g.id for g in active_goals], range_start, today
        )
        check_ins = [CheckIn.model_validate(row) for row in rows]

    items = schedule.classify_check_ins(active_goals, check_ins, today)
    for item in items:
        item["goal"] = item["goal"].model_dump(mode="json")
        if "oldest_missed_date" in item:
            item["days_since_oldest"] = (today - item["oldest_missed_date"]).days
            item["oldest_missed_date"] = item["oldest_missed_date"].isoformat()

    return {
        "date": today.isoformat(),
        "items": items,
        "overdue_count": sum(1 for i in items if i["check_in_type"] == "overdue"),
        "due_today_count": sum(1 for i in items if i["check_in_type"] == "due_today")
    }


def get_goal_progress(goal_id: str, user_id: str, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Get completion and streak figures for one goal

    Raises:
        GoalNotFoundError: If the goal does not exist or belongs to another user
    """
    today = today or get_local_today_date()
    goal = _to_goal(_require_goal(goal_id, user_id))
    check_ins = [CheckIn.model_validate(row) for row in repository.get_check_ins_for_goal(goal_id, user_id)]

    check_in_dates = {c.check_in_date for c in check_ins}
    current_streak, longest_streak = schedule.compute_streaks(check_in_dates, today)
    overdue = schedule.compute_overdue_goals([goal], check_ins, today).get(goal.id)
    days_left = schedule.days_until_target(goal, today)

    return {
        "goal_id": goal.id,
        "title": goal.title,
        "total_sessions": schedule.calculate_total_sessions(goal),
        "check_in_count": len(check_in_dates),
        "completion_percentage": schedule.calculate_completion_percentage(goal, len(check_in_dates)),
        "current_streak": current_streak,
        "longest_streak": longest_streak,
        "overdue_count": overdue.count if overdue else 0,
        "days_until_target": days_left,
        "target_status": schedule.format_target_status(days_left)
    }
