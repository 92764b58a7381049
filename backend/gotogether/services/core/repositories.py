"""
Repository Layer - Contact edge persistence.

This module implements the contact gateway on top of a request-scoped
SQLAlchemy session, keeping the contact engine free of query code.

Usage:
    from gotogether.services.core.repositories import get_contact_repository

    repo = get_contact_repository(db)
    async with repo.atomic():
        await repo.update_edge(requester_id, accepter_id, status="ACCEPTED")
        await repo.create_edge(accepter_id, requester_id, "ACCEPTED")
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import FlushError

from gotogether.models.contact import Contact, ContactCategory
from gotogether.models.user import User
from gotogether.services.exceptions import DuplicateKeyError, EdgeNotFoundError

logger = logging.getLogger(__name__)


class ContactRepository:
    """
    Repository for contact edges.

    Writes are flushed but never committed here; `atomic()` owns the
    transaction boundary.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _edge_query():
        # populate_existing refreshes edges already in the identity map,
        # including their eager-loaded profile and category.
        return (
            select(Contact)
            .options(
                selectinload(Contact.user),
                selectinload(Contact.contact),
                selectinload(Contact.category),
            )
            .execution_options(populate_existing=True)
        )

    async def find_user(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def find_category(self, category_id: str, owner_id: str) -> Optional[ContactCategory]:
        result = await self.db.execute(
            select(ContactCategory).where(
                ContactCategory.id == category_id,
                ContactCategory.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def find_edge(self, user_id: str, contact_id: str) -> Optional[Contact]:
        result = await self.db.execute(
            self._edge_query().where(
                Contact.user_id == user_id,
                Contact.contact_id == contact_id,
            )
        )
        return result.scalar_one_or_none()

    async def find_edges(
        self,
        by_source: Optional[str] = None,
        by_target: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Contact]:
        stmt = self._edge_query()
        if by_source is not None:
            stmt = stmt.where(Contact.user_id == by_source)
        if by_target is not None:
            stmt = stmt.where(Contact.contact_id == by_target)
        if status is not None:
            stmt = stmt.where(Contact.status == status)

        result = await self.db.execute(stmt.order_by(Contact.created_at.desc()))
        return list(result.scalars().all())

    async def create_edge(
        self,
        user_id: str,
        contact_id: str,
        status: str,
        category_id: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> Contact:
        contact = Contact(
            user_id=user_id,
            contact_id=contact_id,
            status=status,
            category_id=category_id,
            nickname=nickname,
        )
        self.db.add(contact)
        try:
            await self.db.flush()
        except (IntegrityError, FlushError) as e:
            logger.warning(f"Duplicate contact edge {user_id} -> {contact_id}: {e}")
            raise DuplicateKeyError("Contact already exists") from e

        return await self.find_edge(user_id, contact_id)

    async def update_edge(self, user_id: str, contact_id: str, **patch) -> Contact:
        contact = await self.find_edge(user_id, contact_id)
        if contact is None:
            raise EdgeNotFoundError("Contact not found")

        for field, value in patch.items():
            setattr(contact, field, value)
        await self.db.flush()

        # Reload so the category summary matches a changed category_id
        return await self.find_edge(user_id, contact_id)

    async def delete_edge(self, user_id: str, contact_id: str) -> int:
        result = await self.db.execute(
            delete(Contact).where(
                Contact.user_id == user_id,
                Contact.contact_id == contact_id,
            )
        )
        return result.rowcount or 0

    @asynccontextmanager
    async def atomic(self):
        """Commit everything done inside the block, or nothing."""
        try:
            yield self
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise


def get_contact_repository(db: AsyncSession) -> ContactRepository:
    """Get a contact repository bound to ``db``."""
    return ContactRepository(db)
