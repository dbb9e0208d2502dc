"""
Goal scheduling - overdue and due-today check-ins, sessions, completion and streaks

Everything here is pure: callers pass in goals, check-ins and "today" and get
plain values back, so the logic can be exercised without Supabase.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

from momentum.models.goal import CheckIn, Goal, OverdueStatus
from momentum.utils.timezone import day_of_week


def _check_in_keys(check_ins: Iterable[CheckIn]) -> Set[Tuple[str, date]]:
    return {(c.goal_id, c.check_in_date) for c in check_ins}


def _is_required_on(goal: Goal, day: date) -> bool:
    return goal.frequency_mask[day_of_week(day)]


def overdue_range(goal: Goal, today: date) -> Optional[Tuple[date, date]]:
    """
    Get the half-open [start, end) window checked for missed days

    The window opens at the later of start_date and created_at and closes at
    the earlier of end_date and today, so today itself is never included.

    Returns:
        (start, end) tuple, or None when the goal has neither start_date nor created_at
    """
    bounds = [d for d in (goal.start_date, goal.created_at) if d is not None]
    if not bounds:
        return None

    start = max(bounds)
    end = min(goal.end_date or today, today)
    return start, end


def compute_overdue_goals(goals: Iterable[Goal], check_ins: Iterable[CheckIn],
                          today: date) -> Dict[str, OverdueStatus]:
    """
    Find goals with required check-ins missed strictly before today

    Args:
        goals: Goals to examine; completed goals and goals with an empty
            frequency mask are skipped
        check_ins: Existing check-ins (only goal_id and date are used)
        today: The current local date

    Returns:
        Dict of goal_id -> OverdueStatus(count, oldest_missed_date).
        Goals with nothing missed are absent.
    """
    checked_in = _check_in_keys(check_ins)
    overdue: Dict[str, OverdueStatus] = {}

    for goal in goals:
        if goal.completed or not goal.has_frequency:
            continue

        window = overdue_range(goal, today)
        if window is None:
            continue
        start, end = window

        count = 0
        oldest_missed: Optional[date] = None
        day = start
        while day < end:
            if _is_required_on(goal, day) and (goal.id, day) not in checked_in:
                count += 1
                if oldest_missed is None:
                    oldest_missed = day
            day += timedelta(days=1)

        if count:
            overdue[goal.id] = OverdueStatus(count=count, oldest_missed_date=oldest_missed)

    return overdue


def is_due_today(goal: Goal, checked_in_today: bool, today: date) -> bool:
    """
    Check whether a goal still needs today's check-in

    Due today means required on today's weekday and not yet checked in.
    This is separate from being overdue, which only looks at earlier days.
    """
    if goal.completed or not goal.has_frequency:
        return False
    if goal.start_date and today < goal.start_date:
        return False
    if goal.end_date and today > goal.end_date:
        return False
    return _is_required_on(goal, today) and not checked_in_today


def classify_check_ins(goals: List[Goal], check_ins: Iterable[CheckIn], today: date) -> List[Dict]:
    """
    Build the list of pending check-ins: overdue items first, then due today

    A goal can appear twice, once as overdue and once as due today.

    Returns:
        List of dicts with goal, check_in_type ('overdue' or 'due_today'),
        and for overdue items the count and oldest_missed_date
    """
    check_ins = list(check_ins)
    overdue = compute_overdue_goals(goals, check_ins, today)
    checked_in_today = {c.goal_id for c in check_ins if c.check_in_date == today}

    overdue_items = [
        {
            "goal": goal,
            "check_in_type": "overdue",
            "count": overdue[goal.id].count,
            "oldest_missed_date": overdue[goal.id].oldest_missed_date
        }
        for goal in goals if goal.id in overdue
    ]
    due_today_items = [
        {"goal": goal, "check_in_type": "due_today"}
        for goal in goals if is_due_today(goal, goal.id in checked_in_today, today)
    ]
    return overdue_items + due_today_items


def calculate_total_sessions(goal: Goal) -> int:
    """
    Count required check-ins between start_date and end_date inclusive

    Returns 0 when either date is missing or no weekday is selected.
    """
    if not goal.start_date or not goal.end_date or not goal.has_frequency:
        return 0

    total_days = (goal.end_date - goal.start_date).days + 1
    if total_days <= 0:
        return 0

    days_per_week = sum(1 for day in goal.frequency_mask if day)
    full_weeks, remaining_days = divmod(total_days, 7)

    # Every full week contains each weekday once; walk the partial week
    sessions = full_weeks * days_per_week
    partial_start = goal.start_date + timedelta(days=full_weeks * 7)
    for i in range(remaining_days):
        if _is_required_on(goal, partial_start + timedelta(days=i)):
            sessions += 1

    return sessions


def calculate_completion_percentage(goal: Goal, check_in_count: int) -> int:
    """Percentage of required sessions completed, capped at 100"""
    total_sessions = calculate_total_sessions(goal)
    if total_sessions == 0:
        return 0
    return min(100, int(round(check_in_count * 100 / total_sessions)))


def days_until_target(goal: Goal, today: date) -> Optional[int]:
    """Days until end_date (negative once it has passed), None without one"""
    if goal.end_date is None:
        return None
    return (goal.end_date - today).days


def format_target_status(days: Optional[int]) -> Optional[str]:
    """Human-readable label for days_until_target"""
    if days is None:
        return None
    if days < 0:
        return f"{abs(days)} days overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    return f"{days} days left"


def compute_streaks(dates: Iterable[date], today: date) -> Tuple[int, int]:
    """
    Return (current_streak, longest_streak) of consecutive check-in days

    The current streak counts back from today, or from yesterday when there
    is no check-in yet today; a gap before that breaks it.
    """
    days = set(dates)

    current = 0
    cursor = today if today in days else today - timedelta(days=1)
    while cursor in days:
        current += 1
        cursor -= timedelta(days=1)

    longest = 0
    run = 0
    last_day: Optional[date] = None
    for d in sorted(days):
        if last_day is not None and d == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = d

    return current, longest
