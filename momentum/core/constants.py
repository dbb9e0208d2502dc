"""
Application constants - point values, habit names, level table and table names
"""

# ============================================================================
# SUPABASE TABLES
# ============================================================================

GOALS_TABLE = "goals"
CHECK_INS_TABLE = "progress_photos"
POINTS_DAILY_TABLE = "user_points_daily"

# Check-ins without a photo still need a value in the NOT NULL column
NO_PHOTO_PLACEHOLDER = "no-photo"
CHECK_IN_PHOTO_TYPE = "progress"


# ============================================================================
# POINTS
# ============================================================================

DAILY_HABIT_POINTS = 15
LIKE_POINTS = 10
COMMENT_POINTS = 10
SHARE_POINTS = 15
UPDATE_GOAL_POINTS = 25
BONUS_POINTS = 20

# Daily habits in the order they are shown; each maps to a *_completed column
DAILY_HABITS = [
    "gym",
    "meditation",
    "microlearn",
    "sleep",
    "water",
    "run",
    "reflect",
    "cold_shower",
]

# Tracked on their own rather than derived from a daily-habits record
SEPARATELY_TRACKED_HABITS = ["meditation", "microlearn"]

# Core (social) habits and the column recording each one for the day
CORE_HABIT_FIELDS = {
    "like": "liked_today",
    "comment": "commented_today",
    "share": "shared_today",
    "update_goal": "updated_goal_today",
}

CORE_HABIT_POINTS = {
    "like": LIKE_POINTS,
    "comment": COMMENT_POINTS,
    "share": SHARE_POINTS,
    "update_goal": UPDATE_GOAL_POINTS,
}


# ============================================================================
# LEVELS
# ============================================================================

# Span given to the open-ended top level when drawing progress
TOP_LEVEL_SPAN = 10000

# Number of segments in the level progress bar
LEVEL_PROGRESS_SEGMENTS = 20

LEVELS = [
    {
        "level": 1,
        "title": "Beginner",
        "min_points": 0,
        "unlocks": "Daily challenges + accountability score tracking",
        "rewards": ["Personalized weekly performance summary", "10% referral commission"],
    },
    {
        "level": 2,
        "title": "Committed",
        "min_points": 1400,
        "unlocks": "Streak tracker + habit analytics dashboard",
        "rewards": ["1 free 'Accountability Boost' (double points for 1 day)", "15% referral commission"],
    },
    {
        "level": 3,
        "title": "Focused",
        "min_points": 3200,
        "unlocks": "Access to advanced challenges",
        "rewards": ["Entry into monthly prize draw"],
    },
    {
        "level": 4,
        "title": "Disciplined",
        "min_points": 5500,
        "unlocks": "Custom progress report + leaderboard spotlight",
        "rewards": ["Priority support access", "20% referral commission"],
    },
    {
        "level": 5,
        "title": "Achiever",
        "min_points": 8600,
        "unlocks": "Exclusive community badge + advanced analytics",
        "rewards": ["Entry into monthly prize draw", "2 free 'Accountability Boosts'"],
    },
    {
        "level": 6,
        "title": "Challenger",
        "min_points": 12500,
        "unlocks": "Elite tier challenges + custom goal templates",
        "rewards": ["Entry into premium prize draw", "25% referral commission"],
    },
    {
        "level": 7,
        "title": "Relentless",
        "min_points": 17500,
        "unlocks": "Platinum status + featured profile spotlight",
        "rewards": ["Entry into premium prize draw", "Exclusive merchandise"],
    },
    {
        "level": 8,
        "title": "Ascended",
        "min_points": 24000,
        "unlocks": "Ultimate mastery badge + lifetime benefits",
        "rewards": ["Entry into grand prize draw", "30% referral commission", "Lifetime premium features"],
    },
]

LEVEL_THRESHOLDS = [level["min_points"] for level in LEVELS]


# ============================================================================
# CACHE KEYS
# ============================================================================

TOTAL_POINTS_CACHE_PREFIX = "total_points_"
SCHEDULER_CACHE_SWEEP_JOB_ID = "cache_sweep"
