"""
Goal Routes - Endpoints for goals and check-ins
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException
from momentum.models.goal import CreateGoalRequest, UpdateGoalRequest, CheckInRequest
from momentum.services import goals as goal_service
from momentum.core.exceptions import (
    GoalNotFoundError,
    InvalidGoalDataError,
    CheckInNotFoundError,
    DuplicateCheckInError,
    InvalidCheckInError,
    DatabaseError
)

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("")
async def list_goals(user_id: str):
    """Get all goals for a user"""
    try:
        return goal_service.list_goals(user_id)
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("")
async def create_goal(request: CreateGoalRequest):
    """Create a goal"""
    try:
        return goal_service.create_goal(
            request.user_id,
            request.title,
            request.frequency,
            description=request.description,
            category=request.category,
            start_date=request.start_date,
            end_date=request.end_date
        )
    except InvalidGoalDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/check-ins")
async def get_check_in_summary(user_id: str, today: Optional[date] = None):
    """Get overdue and due-today check-ins for a user"""
    try:
        return goal_service.get_check_in_summary(user_id, today)
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/check-ins/{check_in_id}")
async def delete_check_in(check_in_id: str):
    """Delete a check-in"""
    try:
        return goal_service.delete_check_in(check_in_id)
    except CheckInNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{goal_id}")
async def update_goal(goal_id: str, request: UpdateGoalRequest):
    """Update a goal"""
    try:
        return goal_service.update_goal(goal_id, request.model_dump(exclude_none=True))
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidGoalDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{goal_id}")
async def delete_goal(goal_id: str):
    """Delete a goal"""
    try:
        return goal_service.delete_goal(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{goal_id}/toggle")
async def toggle_goal_completion(goal_id: str):
    """Flip a goal between completed and active"""
    try:
        return goal_service.toggle_goal_completion(goal_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{goal_id}/check-ins")
async def check_in(goal_id: str, request: CheckInRequest):
    """Check in to a goal for today or a missed day"""
    try:
        return goal_service.check_in(
            goal_id,
            request.user_id,
            check_in_date=request.check_in_date,
            photo_url=request.photo_url,
            note=request.note
        )
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidCheckInError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateCheckInError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{goal_id}/progress")
async def get_goal_progress(goal_id: str, user_id: str):
    """Get completion percentage, streaks and target status for a goal"""
    try:
        return goal_service.get_goal_progress(goal_id, user_id)
    except GoalNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
