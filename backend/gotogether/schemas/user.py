from datetime import datetime
from typing import Optional

from pydantic import Field

from gotogether.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: str
    firebase_uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime


class CreateUserRequest(CamelModel):
    firebase_uid: str = Field(..., min_length=1, max_length=128)
    email: Optional[str] = Field(None, max_length=255)
    display_name: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = Field(None, max_length=1024)


class UpdateUserRequest(CamelModel):
    email: Optional[str] = Field(None, max_length=255)
    display_name: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = Field(None, max_length=1024)
