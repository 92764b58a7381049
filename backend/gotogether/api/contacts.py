"""
Contacts API - Contact relationships

Endpoints for:
- Sending, accepting and rejecting contact requests
- Listing accepted contacts and incoming requests
- Re-categorizing and removing contacts
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from gotogether.api.deps import get_contact_service
from gotogether.services.contact_service import ContactService
from gotogether.services.exceptions import (
    AlreadyAcceptedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from gotogether.schemas.base import MessageResponse
from gotogether.schemas.contact import (
    ContactResponse,
    SendContactRequest,
    UpdateContactRequest,
    incoming_edge_response,
    outgoing_edge_response,
)

router = APIRouter()


@router.get("/contacts/{user_id}", response_model=List[ContactResponse])
async def list_contacts(
    user_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    """List accepted contacts, newest first."""
    edges = await contacts.list_accepted(user_id)
    return [outgoing_edge_response(edge) for edge in edges]


@router.post("/contacts/{user_id}", response_model=ContactResponse, status_code=201)
async def send_contact_request(
    user_id: str,
    req: SendContactRequest,
    contacts: ContactService = Depends(get_contact_service),
):
    """Send a contact request (creates one PENDING edge)."""
    try:
        edge = await contacts.send_request(user_id, req.contact_id, req.category_id, req.nickname)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return outgoing_edge_response(edge)


@router.get("/contacts/{user_id}/requests/pending", response_model=List[ContactResponse])
async def list_pending_requests(
    user_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    """List requests awaiting this user's decision."""
    edges = await contacts.list_pending_incoming(user_id)
    return [incoming_edge_response(edge) for edge in edges]


@router.post("/contacts/{user_id}/requests/{contact_id}/accept", response_model=MessageResponse)
async def accept_contact_request(
    user_id: str,
    contact_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    """Accept the request contact_id -> user_id. Creates the reciprocal edge."""
    try:
        await contacts.accept_request(user_id, contact_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlreadyAcceptedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return MessageResponse(message="Contact request accepted")


@router.post("/contacts/{user_id}/requests/{contact_id}/reject", status_code=204)
async def reject_contact_request(
    user_id: str,
    contact_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    """Reject (delete) the pending request contact_id -> user_id."""
    try:
        await contacts.reject_request(user_id, contact_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/contacts/{user_id}/{contact_id}", response_model=ContactResponse)
async def get_contact(
    user_id: str,
    contact_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    try:
        edge = await contacts.get_contact(user_id, contact_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return outgoing_edge_response(edge)


@router.put("/contacts/{user_id}/{contact_id}", response_model=ContactResponse)
async def update_contact(
    user_id: str,
    contact_id: str,
    req: UpdateContactRequest,
    contacts: ContactService = Depends(get_contact_service),
):
    """Change the category (or nickname) of this user's side of the contact."""
    try:
        edge = await contacts.update_contact(user_id, contact_id, **req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return outgoing_edge_response(edge)


@router.delete("/contacts/{user_id}/{contact_id}", status_code=204)
async def remove_contact(
    user_id: str,
    contact_id: str,
    contacts: ContactService = Depends(get_contact_service),
):
    """Remove the contact in both directions. Idempotent."""
    await contacts.remove_contact(user_id, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
