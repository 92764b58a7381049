"""
Protocol definitions for external collaborators.

This module defines interfaces (Python Protocols) that allow:
- Swapping implementations (e.g., PostgreSQL → in-memory, JWT → Firebase)
- Testing without real identity provider credentials
- Clear contracts between the contact engine and the store

Usage:
    from gotogether.services.protocols import ContactGatewayProtocol

    async def accept(gateway: ContactGatewayProtocol, accepter_id: str, requester_id: str):
        async with gateway.atomic():
            await gateway.update_edge(requester_id, accepter_id, status="ACCEPTED")
            await gateway.create_edge(accepter_id, requester_id, "ACCEPTED")
"""

from dataclasses import dataclass
from typing import AsyncContextManager, List, Optional, Protocol

from gotogether.models.contact import Contact, ContactCategory
from gotogether.models.user import User


@dataclass(frozen=True)
class IdentityClaims:
    """Verified identity of the caller, as reported by the identity provider."""
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
    provider_id: Optional[str] = None


class IdentityProviderProtocol(Protocol):
    """
    Interface for bearer token verification.

    Implementations raise IdentityError when the token is not valid.
    """

    async def verify_token(self, token: str) -> IdentityClaims:
        ...


class ContactGatewayProtocol(Protocol):
    """
    Interface for contact edge persistence.

    Every call may suspend on store I/O. Edges returned by the find
    methods carry the user, counterpart and category already loaded.
    """

    async def find_user(self, user_id: str) -> Optional[User]:
        ...

    async def find_category(self, category_id: str, owner_id: str) -> Optional[ContactCategory]:
        ...

    async def find_edge(self, user_id: str, contact_id: str) -> Optional[Contact]:
        ...

    async def find_edges(
        self,
        by_source: Optional[str] = None,
        by_target: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Contact]:
        """Matching edges, newest first."""
        ...

    async def create_edge(
        self,
        user_id: str,
        contact_id: str,
        status: str,
        category_id: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> Contact:
        """Raises DuplicateKeyError when (user_id, contact_id) exists."""
        ...

    async def update_edge(self, user_id: str, contact_id: str, **patch) -> Contact:
        """Raises EdgeNotFoundError when the edge is absent."""
        ...

    async def delete_edge(self, user_id: str, contact_id: str) -> int:
        """Returns the number of rows removed (0 when absent)."""
        ...

    def atomic(self) -> AsyncContextManager:
        """All-or-nothing unit of work."""
        ...
