"""
Pydantic models for goals and check-ins
"""
from datetime import date, datetime
from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import List, Optional

from momentum.utils.timezone import get_app_tz


def _coerce_date(v):
    """Accept dates, datetimes and ISO strings (timestamps keep their date part)"""
    if v is None or v == "":
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str):
        return v[:10]
    return v


def _coerce_local_date(v):
    """Reduce a timestamp to its calendar day in the app timezone"""
    if v is None or v == "":
        return None
    if isinstance(v, str):
        if len(v) <= 10:
            return v
        v = datetime.fromisoformat(v.replace("Z", "+00:00"))
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(get_app_tz())
        return v.date()
    return v


def _coerce_frequency(v):
    if v is None:
        return [False] * 7
    v = list(v)
    if len(v) != 7:
        raise ValueError(f"Frequency mask must have 7 entries (Sun..Sat), got {len(v)}")
    return [bool(day) for day in v]


class Goal(BaseModel):
    """A recurring goal as stored in the goals table"""
    id: str
    user_id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    category: Optional[str] = None
    frequency_mask: List[bool] = Field(
        default_factory=lambda: [False] * 7,
        validation_alias=AliasChoices("frequency_mask", "frequency"),
        description="Required weekdays, Sunday=0 through Saturday=6"
    )
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[date] = None
    completed: bool = False

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return None if v is None else str(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_dates(cls, v):
        return _coerce_date(v)

    # created_at is a UTC timestamptz; start_date and today are local days
    @field_validator("created_at", mode="before")
    @classmethod
    def coerce_created_at(cls, v):
        return _coerce_local_date(v)

    @field_validator("frequency_mask", mode="before")
    @classmethod
    def validate_frequency(cls, v):
        return _coerce_frequency(v)

    @property
    def has_frequency(self) -> bool:
        return any(self.frequency_mask)


class CheckIn(BaseModel):
    """A check-in record; only its goal and date matter for scheduling"""
    id: Optional[str] = None
    goal_id: str
    check_in_date: date = Field(validation_alias=AliasChoices("check_in_date", "date"))
    photo_url: Optional[str] = None
    note: Optional[str] = None

    @field_validator("id", "goal_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return None if v is None else str(v)

    @field_validator("check_in_date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return _coerce_date(v)


class OverdueStatus(BaseModel):
    """Missed required check-ins for one goal, strictly before today"""
    count: int
    oldest_missed_date: date


class CreateGoalRequest(BaseModel):
    """Request model for creating a goal"""
    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200, description="Goal title")
    description: Optional[str] = None
    category: Optional[str] = None
    frequency: List[bool] = Field(..., description="Required weekdays, Sunday=0 through Saturday=6")
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("frequency", mode="before")
    @classmethod
    def validate_frequency(cls, v):
        return _coerce_frequency(v)


class UpdateGoalRequest(BaseModel):
    """Request model for updating a goal; only provided fields are changed"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    frequency: Optional[List[bool]] = None
    end_date: Optional[date] = None
    completed: Optional[bool] = None

    @field_validator("frequency", mode="before")
    @classmethod
    def validate_frequency(cls, v):
        if v is None:
            return v
        return _coerce_frequency(v)


class CheckInRequest(BaseModel):
    """Request model for checking in to a goal"""
    user_id: str = Field(..., min_length=1)
    check_in_date: Optional[date] = Field(None, description="Defaults to today")
    photo_url: Optional[str] = None
    note: Optional[str] = Field(None, max_length=1000)
