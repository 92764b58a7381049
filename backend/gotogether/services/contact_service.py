"""
Contact Service - Contact relationship lifecycle

Encapsulates logic for:
- Sending/Accepting/Rejecting contact requests
- Listing accepted contacts and incoming requests
- Removing contacts (both directions) and re-categorizing one direction

Every multi-step transition runs inside one gateway transaction, so a
friendship is never observed with only one of its two edges.
"""
import logging
from typing import List, Optional

from gotogether.models.contact import Contact, ContactStatus
from gotogether.services.protocols import ContactGatewayProtocol
from gotogether.services.exceptions import (
    AlreadyAcceptedError,
    DuplicateKeyError,
    DuplicateRequestError,
    EdgeNotFoundError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_UNSET = object()


class ContactService:
    """Service for managing contact edges and contact requests."""

    def __init__(self, gateway: ContactGatewayProtocol):
        self.gateway = gateway

    async def _require_category(self, category_id: Optional[str], owner_id: str) -> None:
        if category_id is None:
            return
        category = await self.gateway.find_category(category_id, owner_id)
        if category is None:
            raise NotFoundError("Category not found")

    async def send_request(
        self,
        requester_id: str,
        target_id: str,
        category_id: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> Contact:
        """
        Send a contact request (one PENDING edge requester -> target).

        Raises:
            ValidationError: target is missing or is the requester
            NotFoundError: target user or category does not exist
            DuplicateRequestError: the edge already exists in any status
        """
        if not target_id:
            raise ValidationError("contactId required")
        if requester_id == target_id:
            raise ValidationError("You cannot add yourself as a contact")

        if await self.gateway.find_user(requester_id) is None:
            raise NotFoundError("User not found")
        if await self.gateway.find_user(target_id) is None:
            raise NotFoundError("Contact user not found")
        await self._require_category(category_id, requester_id)

        if await self.gateway.find_edge(requester_id, target_id) is not None:
            raise DuplicateRequestError("Contact request already exists")

        try:
            async with self.gateway.atomic():
                edge = await self.gateway.create_edge(
                    requester_id,
                    target_id,
                    ContactStatus.PENDING,
                    category_id=category_id,
                    nickname=nickname,
                )
        except DuplicateKeyError as e:
            # Lost a race against a concurrent identical request
            raise DuplicateRequestError("Contact request already exists") from e

        logger.info(f"Contact request sent {requester_id} -> {target_id}")
        return edge

    async def list_accepted(self, user_id: str) -> List[Contact]:
        """Accepted edges owned by ``user_id``, newest first."""
        return await self.gateway.find_edges(by_source=user_id, status=ContactStatus.ACCEPTED)

    async def list_pending_incoming(self, user_id: str) -> List[Contact]:
        """Pending edges pointing at ``user_id``, newest first."""
        return await self.gateway.find_edges(by_target=user_id, status=ContactStatus.PENDING)

    async def get_contact(self, user_id: str, other_id: str) -> Contact:
        """The edge user -> other in any status. Raises NotFoundError when absent."""
        edge = await self.gateway.find_edge(user_id, other_id)
        if edge is None:
            raise NotFoundError("Contact not found")
        return edge

    async def accept_request(self, accepter_id: str, requester_id: str) -> None:
        """
        Accept the request requester -> accepter.

        Marks it ACCEPTED and creates the reciprocal ACCEPTED edge in one
        transaction. If the reciprocal edge already exists the store rejects
        the insert and nothing is committed.
        """
        request = await self.gateway.find_edge(requester_id, accepter_id)
        if request is None:
            raise NotFoundError("Contact request not found")
        if request.is_accepted:
            raise AlreadyAcceptedError("Contact request already accepted")

        try:
            async with self.gateway.atomic():
                await self.gateway.update_edge(
                    requester_id, accepter_id, status=ContactStatus.ACCEPTED
                )
                await self.gateway.create_edge(
                    accepter_id, requester_id, ContactStatus.ACCEPTED
                )
        except DuplicateKeyError as e:
            logger.warning(
                f"Accept {requester_id} -> {accepter_id} refused: reciprocal edge exists"
            )
            raise DuplicateRequestError("A contact edge in the other direction already exists") from e
        except EdgeNotFoundError as e:
            # Request withdrawn between the lookup and the update
            raise NotFoundError("Contact request not found") from e

        logger.info(f"Contact request accepted {requester_id} <-> {accepter_id}")

    async def reject_request(self, rejecter_id: str, requester_id: str) -> None:
        """Delete the PENDING request requester -> rejecter."""
        request = await self.gateway.find_edge(requester_id, rejecter_id)
        if request is None or request.status != ContactStatus.PENDING:
            raise NotFoundError("Contact request not found")

        async with self.gateway.atomic():
            await self.gateway.delete_edge(requester_id, rejecter_id)

        logger.info(f"Contact request rejected {requester_id} -> {rejecter_id}")

    async def remove_contact(self, user_id: str, other_id: str) -> int:
        """
        Remove both directions between the two users.

        Idempotent: returns how many edges were deleted (0, 1 or 2).
        """
        async with self.gateway.atomic():
            removed = await self.gateway.delete_edge(user_id, other_id)
            removed += await self.gateway.delete_edge(other_id, user_id)

        logger.info(f"Contact removed {user_id} <-> {other_id} ({removed} edges)")
        return removed

    async def update_contact(
        self,
        user_id: str,
        other_id: str,
        category_id=_UNSET,
        nickname=_UNSET,
    ) -> Contact:
        """
        Update the category (and nickname) of the edge user -> other.

        The reciprocal edge keeps its own category. Passing
        ``category_id=None`` clears the category.
        """
        patch = {}
        if category_id is not _UNSET:
            await self._require_category(category_id, user_id)
            patch["category_id"] = category_id
        if nickname is not _UNSET:
            patch["nickname"] = nickname

        try:
            async with self.gateway.atomic():
                edge = await self.gateway.update_edge(user_id, other_id, **patch)
        except EdgeNotFoundError as e:
            raise NotFoundError("Contact not found") from e

        return edge

    async def update_category(self, user_id: str, other_id: str, category_id: Optional[str]) -> Contact:
        """Set or clear (None) the category of the edge user -> other."""
        return await self.update_contact(user_id, other_id, category_id=category_id)
