import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.models.contact import ContactCategory
from gotogether.services.exceptions import NotFoundError, ValidationError
from gotogether.services.user_service import user_service

logger = logging.getLogger(__name__)


class CategoryService:
    """Contact categories owned by one user."""

    @staticmethod
    async def list_for_user(db: AsyncSession, user_id: str) -> List[ContactCategory]:
        result = await db.execute(
            select(ContactCategory)
            .where(ContactCategory.user_id == user_id)
            .order_by(ContactCategory.name.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_owned(db: AsyncSession, user_id: str, category_id: str) -> ContactCategory:
        result = await db.execute(
            select(ContactCategory).where(
                ContactCategory.id == category_id,
                ContactCategory.user_id == user_id,
            )
        )
        category = result.scalar_one_or_none()
        if not category:
            raise NotFoundError("Category not found")
        return category

    @staticmethod
    async def create(db: AsyncSession, user_id: str, name: str, color: Optional[str] = None) -> ContactCategory:
        if not name:
            raise ValidationError("name required")
        await user_service.get_or_fail(db, user_id)

        category = ContactCategory(user_id=user_id, name=name, color=color)
        db.add(category)
        await db.commit()
        await db.refresh(category)
        return category

    @staticmethod
    async def update(db: AsyncSession, user_id: str, category_id: str, **fields) -> ContactCategory:
        category = await CategoryService.get_owned(db, user_id, category_id)
        for name, value in fields.items():
            setattr(category, name, value)
        await db.commit()
        await db.refresh(category)
        return category

    @staticmethod
    async def delete(db: AsyncSession, user_id: str, category_id: str) -> None:
        """Delete a category; contacts using it keep their edge with no category."""
        category = await CategoryService.get_owned(db, user_id, category_id)
        await db.delete(category)
        await db.commit()
        logger.info(f"Deleted category {category_id} of user {user_id}")


category_service = CategoryService()
