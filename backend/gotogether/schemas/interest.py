from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from gotogether.schemas.base import CamelModel


class InterestResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime


class CreateInterestRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class UpdateInterestRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


class UserInterestResponse(CamelModel):
    user_id: str
    interest_id: str
    created_at: datetime
    interest: InterestResponse


class AddUserInterestRequest(CamelModel):
    interest_id: str = Field(..., min_length=1)
