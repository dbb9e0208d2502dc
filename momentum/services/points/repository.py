"""
Points Repository - Database access for the daily points ledger
"""
from datetime import date
from typing import List, Dict, Any, Optional
import logging

from momentum.core.constants import POINTS_DAILY_TABLE
from momentum.core.dependencies import get_supabase_client
from momentum.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def get_daily_record(user_id: str, points_date: date) -> Optional[Dict[str, Any]]:
    """
    Get a user's points row for one day

    Returns:
        Row dictionary or None if the user has no points that day

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(POINTS_DAILY_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("date", points_date.isoformat())
            .limit(1)
            .execute()
        )
        return result.data[0] if result.data else None
    except Exception as e:
        logger.error(f"Database error fetching daily points for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch daily points: {e}")


def upsert_daily_record(user_id: str, points_date: date, update_data: Dict[str, Any],
                        exists: bool) -> Dict[str, Any]:
    """
    Update the day's row, or insert it when the user has none yet

    Args:
        user_id: The user ID
        points_date: Day the points belong to
        update_data: Columns to write
        exists: Whether a row for the day was already read

    Raises:
        DatabaseError: If the write fails
    """
    try:
        supabase = get_supabase_client()
        if exists:
            result = (
                supabase.table(POINTS_DAILY_TABLE)
                .update(update_data)
                .eq("user_id", user_id)
                .eq("date", points_date.isoformat())
                .execute()
            )
        else:
            row = {"user_id": user_id, "date": points_date.isoformat(), **update_data}
            result = supabase.table(POINTS_DAILY_TABLE).insert(row).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error writing daily points for user {user_id}: {e}")
        raise DatabaseError(f"Failed to save daily points: {e}")


def get_daily_totals(user_id: str) -> List[Dict[str, Any]]:
    """
    Get every day's total for a user

    Returns:
        List of dicts with total_points_today

    Raises:
        DatabaseError: If query fails
    """
    try:
        supabase = get_supabase_client()
        result = (
            supabase.table(POINTS_DAILY_TABLE)
            .select("total_points_today")
            .eq("user_id", user_id)
            .execute()
        )
        return result.data or []
    except Exception as e:
        logger.error(f"Database error fetching points history for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch points history: {e}")
