"""
Level progression - maps cumulative points onto the level table
"""
from typing import Optional, Sequence

from momentum.core.constants import (
    LEVELS,
    LEVEL_THRESHOLDS,
    LEVEL_PROGRESS_SEGMENTS,
    TOP_LEVEL_SPAN
)
from momentum.core.exceptions import InvalidLevelTableError
from momentum.models.points import LevelInfo, LevelProgress


def validate_thresholds(thresholds: Sequence[int]) -> None:
    """
    Check that a threshold table is usable

    Raises:
        InvalidLevelTableError: If the table is empty or not strictly ascending
    """
    if not thresholds:
        raise InvalidLevelTableError("Level table must contain at least one threshold")

    for previous, current in zip(thresholds, thresholds[1:]):
        if current <= previous:
            raise InvalidLevelTableError(
                f"Level thresholds must be strictly ascending, got {previous} then {current}"
            )


def _level_index(total_points: int, thresholds: Sequence[int]) -> int:
    # Largest index whose threshold has been reached, clamped to the table
    index = 0
    for i, threshold in enumerate(thresholds):
        if threshold <= total_points:
            index = i
        else:
            break
    return max(0, min(index, len(thresholds) - 1))


def get_current_level(total_points: int, thresholds: Sequence[int] = LEVEL_THRESHOLDS) -> int:
    """Get the 1-based level for a point total"""
    validate_thresholds(thresholds)
    return _level_index(total_points, thresholds) + 1


def level_progress(total_points: int, thresholds: Sequence[int] = LEVEL_THRESHOLDS) -> LevelProgress:
    """
    Work out the current level and progress through it

    Out-of-range totals are clamped rather than rejected: anything below the
    first threshold sits at the bottom of level 1 and the top level is
    treated as spanning TOP_LEVEL_SPAN points.

    Args:
        total_points: Cumulative points
        thresholds: Strictly ascending points needed for each level, index 0 = level 1

    Returns:
        LevelProgress for the total

    Raises:
        InvalidLevelTableError: If thresholds are empty or not ascending
    """
    validate_thresholds(thresholds)

    index = _level_index(total_points, thresholds)
    is_top_level = index == len(thresholds) - 1

    level_floor = thresholds[index]
    next_boundary = level_floor + TOP_LEVEL_SPAN if is_top_level else thresholds[index + 1]

    points_in_level = max(0, total_points - level_floor)
    points_needed_for_next = next_boundary - level_floor
    segments_filled = min(
        LEVEL_PROGRESS_SEGMENTS,
        points_in_level * LEVEL_PROGRESS_SEGMENTS // points_needed_for_next
    )

    current_level = index + 1
    return LevelProgress(
        current_level=current_level,
        next_level=current_level if is_top_level else current_level + 1,
        points_in_level=points_in_level,
        points_needed_for_next=points_needed_for_next,
        segments_filled=segments_filled
    )


def get_level_table() -> list:
    """Get every level with its points range"""
    table = []
    for i, level in enumerate(LEVELS):
        max_points: Optional[int] = None
        if i + 1 < len(LEVELS):
            max_points = LEVELS[i + 1]["min_points"] - 1
        table.append(LevelInfo(max_points=max_points, **level))
    return table


def get_level_info(level: int) -> LevelInfo:
    """
    Get the table row for a level

    Levels outside the table are clamped to the first or last row.
    """
    table = get_level_table()
    index = max(0, min(level - 1, len(table) - 1))
    return table[index]
