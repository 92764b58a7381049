from datetime import datetime, UTC
from typing import List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from gotogether.config.constants import HANGOUTS_DEFAULT_PAGE_SIZE, HANGOUTS_MAX_PAGE_SIZE
from gotogether.schemas.base import CamelModel


def utc_naive(value: datetime) -> datetime:
    """Comparable form of ``value``: naive UTC."""
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


class HangoutResponse(CamelModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    starts_at: datetime
    ends_at: Optional[datetime] = None
    is_public: bool
    created_at: datetime


class VisibilityResponse(CamelModel):
    id: str
    hangout_id: str
    category_id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: datetime


class HangoutDetailResponse(HangoutResponse):
    visibility: List[VisibilityResponse] = []


class CreateHangoutRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    starts_at: datetime
    ends_at: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    is_public: bool = False

    @model_validator(mode="after")
    def check_time_window(self):
        if self.ends_at is not None and utc_naive(self.ends_at) < utc_naive(self.starts_at):
            raise ValueError("endsAt must not be before startsAt")
        return self


class UpdateHangoutRequest(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    is_public: Optional[bool] = None

    # Columns that cannot be cleared
    @field_validator("title", "starts_at", "is_public")
    @classmethod
    def required_fields_not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


class AddVisibilityRequest(CamelModel):
    category_id: Optional[str] = None
    user_id: Optional[str] = None


class HangoutFilters(CamelModel):
    """Query-string filters for listing hangouts."""
    user_id: Optional[str] = None
    title: Optional[str] = None
    is_public: Optional[bool] = None
    starts_at_from: Optional[datetime] = None
    starts_at_to: Optional[datetime] = None
    ends_at_from: Optional[datetime] = None
    ends_at_to: Optional[datetime] = None
    lat_min: Optional[float] = None
    lat_max: Optional[float] = None
    lng_min: Optional[float] = None
    lng_max: Optional[float] = None
    interest_id: Optional[str] = None
    order_by: Literal["startsAt", "endsAt", "createdAt", "title"] = "startsAt"
    order_dir: Literal["asc", "desc"] = "asc"
    page: int = Field(1, ge=1)
    limit: int = Field(HANGOUTS_DEFAULT_PAGE_SIZE, ge=1, le=HANGOUTS_MAX_PAGE_SIZE)
