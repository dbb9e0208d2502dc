"""
Points module - daily points ledger and level progression
"""
from . import levels
from . import repository
from . import service

from .levels import level_progress, get_current_level, get_level_info, get_level_table

from .service import (
    calculate_daily_habits_points,
    save_daily_habits,
    track_habit,
    track_daily_habit,
    track_core_habit,
    update_core_habit_status,
    check_and_award_bonus,
    get_todays_points,
    get_core_habits_status,
    get_total_points,
    get_level_summary
)

__all__ = [
    'levels',
    'repository',
    'service',
    'level_progress',
    'get_current_level',
    'get_level_info',
    'get_level_table',
    'calculate_daily_habits_points',
    'save_daily_habits',
    'track_habit',
    'track_daily_habit',
    'track_core_habit',
    'update_core_habit_status',
    'check_and_award_bonus',
    'get_todays_points',
    'get_core_habits_status',
    'get_total_points',
    'get_level_summary'
]
