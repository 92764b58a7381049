"""
Schemas Package

Pydantic models for the REST API. JSON keys are camelCase.
"""

from gotogether.schemas.base import CamelModel, MessageResponse
from gotogether.schemas.contact import (
    CategorySummary,
    ContactResponse,
    SendContactRequest,
    UpdateContactRequest,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from gotogether.schemas.user import UserResponse, CreateUserRequest, UpdateUserRequest

__all__ = [
    "CamelModel",
    "MessageResponse",
    "CategorySummary",
    "ContactResponse",
    "SendContactRequest",
    "UpdateContactRequest",
    "CategoryResponse",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "UserResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
]
