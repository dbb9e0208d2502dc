"""
Goals Repository - Centralized database access layer
All Supabase queries for goals and check-ins
"""
from datetime import date
from typing import List, Dict, Any, Optional
import logging

from momentum.core.constants import (
    GOALS_TABLE,
    CHECK_INS_TABLE,
    NO_PHOTO_PLACEHOLDER,
    CHECK_IN_PHOTO_TYPE
)
from momentum.core.dependencies import get_supabase_client
from momentum.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# ============================================================================
# GOALS TABLE
# ============================================================================

def get_goals_for_user(user_id: str) -> List[Dict[str, Any]]:
    """
    Get all goals for a user, newest first

    Args:
        user_id: The user ID

    Returns:
        List of goal dictionaries

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(GOALS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return result.data or []
    except Exception as e:
        logger.error(f"Database error fetching goals for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch goals: {e}")


def get_goal_by_id(goal_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a single goal by ID

    Returns:
        Goal dictionary or None if not found

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(GOALS_TABLE).select("*").eq("id", goal_id).execute()
        return result.data[0] if result.data else None
    except Exception as e:
        logger.error(f"Database error fetching goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to fetch goal: {e}")


def create_goal(goal_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a new goal

    Args:
        goal_data: Column values for the new row (user_id, title, frequency, start_date, ...)

    Returns:
        Created goal data

    Raises:
        DatabaseError: If insert fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(GOALS_TABLE).insert(goal_data).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error creating goal: {e}")
        raise DatabaseError(f"Failed to create goal: {e}")


def update_goal(goal_id: str, update_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update a goal

    Returns:
        Updated goal data

    Raises:
        DatabaseError: If update fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(GOALS_TABLE).update(update_data).eq("id", goal_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error updating goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to update goal: {e}")


def delete_goal(goal_id: str) -> Dict[str, Any]:
    """
    Delete a goal

    Returns:
        Deleted goal data

    Raises:
        DatabaseError: If delete fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(GOALS_TABLE).delete().eq("id", goal_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error deleting goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to delete goal: {e}")


# ============================================================================
# CHECK-INS (PROGRESS PHOTOS) TABLE
# ============================================================================

def create_check_in(user_id: str, goal_id: str, check_in_date: date,
                    photo_url: Optional[str] = None, note: Optional[str] = None) -> Dict[str, Any]:
    """
    Record a check-in for a goal

    Args:
        user_id: The user ID
        goal_id: The goal ID
        check_in_date: Day the check-in counts for
        photo_url: Optional URL of an uploaded progress photo
        note: Optional note

    Returns:
        Created check-in data

    Raises:
        DatabaseError: If insert fails
    """
    try:
        supabase = get_supabase_client()
        check_in_data = {
            "user_id": user_id,
            "goal_id": goal_id,
            "photo_url": photo_url or NO_PHOTO_PLACEHOLDER,
            "photo_type": CHECK_IN_PHOTO_TYPE,
            "check_in_date": check_in_date.isoformat()
        }
        if note:
            check_in_data["note"] = note

        result = supabase.table(CHECK_INS_TABLE).insert(check_in_data).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error creating check-in for goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to create check-in: {e}")


def get_check_in_by_id(check_in_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a single check-in by ID

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(CHECK_INS_TABLE).select("*").eq("id", check_in_id).execute()
        return result.data[0] if result.data else None
    except Exception as e:
        logger.error(f"Database error fetching check-in {check_in_id}: {e}")
        raise DatabaseError(f"Failed to fetch check-in: {e}")


def delete_check_in(check_in_id: str) -> Dict[str, Any]:
    """
    Delete a check-in

    Raises:
        DatabaseError: If delete fails
    """
    try:
        supabase = get_supabase_client()
        result = supabase.table(CHECK_INS_TABLE).delete().eq("id", check_in_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error deleting check-in {check_in_id}: {e}")
        raise DatabaseError(f"Failed to delete check-in: {e}")


def get_check_ins_for_goal(goal_id: str, user_id: str) -> List[Dict[str, Any]]:
    """
    Get every check-in for a goal, newest first

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(CHECK_INS_TABLE)
            .select("*")
            .eq("goal_id", goal_id)
            .eq("user_id", user_id)
            .order("check_in_date", desc=True)
            .execute()
        )
        return result.data or []
    except Exception as e:
        logger.error(f"Database error fetching check-ins for goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to fetch check-ins: {e}")


def has_check_in(goal_id: str, user_id: str, check_in_date: date) -> bool:
    """
    Check if a goal already has a check-in on a date

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(CHECK_INS_TABLE)
            .select("id, check_in_date")
            .eq("goal_id", goal_id)
            .eq("user_id", user_id)
            .eq("check_in_date", check_in_date.isoformat())
            .limit(1)
            .execute()
        )
        return bool(result.data)
    except Exception as e:
        logger.error(f"Database error checking check-in for goal {goal_id}: {e}")
        raise DatabaseError(f"Failed to check for existing check-in: {e}")


def get_check_ins_for_goals_in_range(user_id: str, goal_ids: List[str],
                                     start_date: date, end_date: date) -> List[Dict[str, Any]]:
    """
    Get check-ins for several goals within an inclusive date range (batch query)

    Returns:
        List of dicts with goal_id and check_in_date

    Raises:
        DatabaseError: If query fails
    """
    if not goal_ids:
        return []

    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(CHECK_INS_TABLE)
            .select("goal_id, check_in_date")
            .eq("user_id", user_id)
            .in_("goal_id", goal_ids)
            .gte("check_in_date", start_date.isoformat())
            .lte("check_in_date", end_date.isoformat())
            .execute()
        )
        return result.data or []
    except Exception as e:
        logger.error(f"Database error fetching batch check-ins for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch check-ins: {e}")
