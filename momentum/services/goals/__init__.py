"""
Goals module - goals, check-ins and schedule calculations
"""
from . import repository
from . import schedule
from . import service

from .schedule import (
    compute_overdue_goals,
    is_due_today,
    classify_check_ins,
    calculate_total_sessions,
    calculate_completion_percentage,
    days_until_target,
    compute_streaks
)

from .service import (
    list_goals,
    create_goal,
    update_goal,
    delete_goal,
    toggle_goal_completion,
    check_in,
    delete_check_in,
    get_check_in_summary,
    get_goal_progress
)

__all__ = [
    # Modules
    'repository',
    'schedule',
    'service',

    # Schedule calculations
    'compute_overdue_goals',
    'is_due_today',
    'classify_check_ins',
    'calculate_total_sessions',
    'calculate_completion_percentage',
    'days_until_target',
    'compute_streaks',

    # Service functions
    'list_goals',
    'create_goal',
    'update_goal',
    'delete_goal',
    'toggle_goal_completion',
    'check_in',
    'delete_check_in',
    'get_check_in_summary',
    'get_goal_progress'
]
