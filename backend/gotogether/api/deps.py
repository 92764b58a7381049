from typing import Optional
import logging

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.models.database import get_db
from gotogether.services.contact_service import ContactService
from gotogether.services.core.repositories import get_contact_repository
from gotogether.services.exceptions import IdentityError
from gotogether.services.identity_service import identity_provider
from gotogether.services.protocols import IdentityClaims, IdentityProviderProtocol

logger = logging.getLogger(__name__)


def get_identity_provider() -> IdentityProviderProtocol:
    """
    Dependency for the identity provider adapter.
    Tests replace it through app.dependency_overrides.
    """
    return identity_provider


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    provider: IdentityProviderProtocol = Depends(get_identity_provider),
) -> IdentityClaims:
    """Verify the bearer token and return the caller's identity claims."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing Bearer token")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing Bearer token")

    try:
        return await provider.verify_token(token)
    except IdentityError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def get_contact_service(db: AsyncSession = Depends(get_db)) -> ContactService:
    """Contact engine bound to the request's session."""
    return ContactService(get_contact_repository(db))
