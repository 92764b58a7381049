from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from gotogether.models.contact import Contact
from gotogether.models.user import User
from gotogether.schemas.base import CamelModel


class CategorySummary(CamelModel):
    id: str
    name: str
    color: Optional[str] = None


class ContactResponse(CamelModel):
    """Edge DTO: one contact edge seen from one side."""
    id: str  # the other user's id
    display_name: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None
    nickname: Optional[str] = None
    status: str
    category: Optional[CategorySummary] = None
    created_at: datetime


class SendContactRequest(CamelModel):
    contact_id: Optional[str] = None
    category_id: Optional[str] = None
    nickname: Optional[str] = Field(None, max_length=255)


class UpdateContactRequest(CamelModel):
    category_id: Optional[str] = None
    nickname: Optional[str] = Field(None, max_length=255)


class CategoryResponse(CamelModel):
    id: str
    user_id: str
    name: str
    color: Optional[str] = None
    created_at: datetime


class CreateCategoryRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=20)


class UpdateCategoryRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=20)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


def edge_to_response(edge: Contact, counterpart: User, include_category: bool = True) -> ContactResponse:
    """Assemble the denormalized DTO for ``edge`` showing ``counterpart``."""
    category = edge.category if include_category else None
    return ContactResponse(
        id=counterpart.id,
        display_name=counterpart.display_name,
        email=counterpart.email,
        photo_url=counterpart.photo_url,
        nickname=edge.nickname,
        status=edge.status,
        category=CategorySummary(**category.to_summary()) if category else None,
        created_at=edge.created_at,
    )


def outgoing_edge_response(edge: Contact) -> ContactResponse:
    """DTO for an edge owned by the caller (shows the target)."""
    return edge_to_response(edge, edge.contact)


def incoming_edge_response(edge: Contact) -> ContactResponse:
    """DTO for an edge pointing at the caller (shows the requester).

    The category belongs to the requester's side, so it is not exposed.
    """
    return edge_to_response(edge, edge.user, include_category=False)
