"""
Points Routes - Endpoints for daily points and levels
"""
from fastapi import APIRouter, HTTPException
from momentum.models.points import DailyHabitsRecord, TrackHabitRequest
from momentum.services import points as points_service
from momentum.core.exceptions import InvalidPointsDataError, DatabaseError

router = APIRouter(prefix="/points", tags=["points"])


@router.get("/levels")
async def get_levels():
    """Get the level table"""
    return {"levels": [level.model_dump() for level in points_service.get_level_table()]}


@router.get("/levels/progress")
async def get_level_progress(total_points: int):
    """Work out level progress for a point total"""
    return points_service.level_progress(total_points).model_dump()


@router.get("/{user_id}/today")
async def get_todays_points(user_id: str):
    """Get today's points breakdown and core habit status"""
    try:
        return {
            "points": points_service.get_todays_points(user_id).model_dump(),
            "core_habits": points_service.get_core_habits_status(user_id).model_dump()
        }
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}/level")
async def get_level_summary(user_id: str):
    """Get total points and level progress for a user"""
    try:
        return points_service.get_level_summary(user_id)
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{user_id}/daily-habits")
async def save_daily_habits(user_id: str, request: DailyHabitsRecord):
    """Recalculate daily-habit points from a saved habit log"""
    try:
        return points_service.save_daily_habits(
            user_id,
            request.model_dump(exclude={"points_date"}),
            request.points_date
        )
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{user_id}/track")
async def track_habit(user_id: str, request: TrackHabitRequest):
    """Track a separately tracked daily habit or a core habit"""
    try:
        return points_service.track_habit(
            user_id,
            request.habit_type,
            request.points_date,
            request.is_active
        )
    except InvalidPointsDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
