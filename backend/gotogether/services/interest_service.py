import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gotogether.models.interest import Interest, UserInterest
from gotogether.services.exceptions import ConflictError, NotFoundError, ValidationError
from gotogether.services.user_service import user_service

logger = logging.getLogger(__name__)


class InterestService:
    """Interest tags and per-user interest selections."""

    @staticmethod
    async def list_interests(db: AsyncSession) -> List[Interest]:
        result = await db.execute(select(Interest).order_by(Interest.name.asc()))
        return list(result.scalars().all())

    @staticmethod
    async def get_or_fail(db: AsyncSession, interest_id: str) -> Interest:
        interest = await db.get(Interest, interest_id)
        if not interest:
            raise NotFoundError("Interest not found")
        return interest

    @staticmethod
    async def create(db: AsyncSession, name: str, description: Optional[str] = None) -> Interest:
        if not name:
            raise ValidationError("name required")
        interest = Interest(name=name, description=description)
        db.add(interest)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError("Interest already exists") from e
        await db.refresh(interest)
        return interest

    @staticmethod
    async def update(db: AsyncSession, interest_id: str, **fields) -> Interest:
        interest = await InterestService.get_or_fail(db, interest_id)
        for name, value in fields.items():
            setattr(interest, name, value)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError("Interest already exists") from e
        await db.refresh(interest)
        return interest

    @staticmethod
    async def delete(db: AsyncSession, interest_id: str) -> None:
        interest = await InterestService.get_or_fail(db, interest_id)
        await db.delete(interest)
        await db.commit()

    @staticmethod
    async def upsert(db: AsyncSession, name: str, description: Optional[str] = None) -> Interest:
        """Create the tag or refresh its description (used by the seed script)."""
        result = await db.execute(select(Interest).where(Interest.name == name))
        interest = result.scalar_one_or_none()
        if interest is None:
            interest = Interest(name=name)
            db.add(interest)
        interest.description = description
        await db.commit()
        return interest

    @staticmethod
    async def list_user_interests(db: AsyncSession, user_id: str) -> List[UserInterest]:
        result = await db.execute(
            select(UserInterest)
            .options(selectinload(UserInterest.interest))
            .where(UserInterest.user_id == user_id)
            .order_by(UserInterest.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def add_user_interest(db: AsyncSession, user_id: str, interest_id: str) -> UserInterest:
        if not interest_id:
            raise ValidationError("interestId required")
        await user_service.get_or_fail(db, user_id)
        await InterestService.get_or_fail(db, interest_id)

        existing = await db.get(UserInterest, (user_id, interest_id))
        if existing:
            raise ConflictError("Interest already selected")

        item = UserInterest(user_id=user_id, interest_id=interest_id)
        db.add(item)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError("Interest already selected") from e

        result = await db.execute(
            select(UserInterest)
            .options(selectinload(UserInterest.interest))
            .where(UserInterest.user_id == user_id, UserInterest.interest_id == interest_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    @staticmethod
    async def remove_user_interest(db: AsyncSession, user_id: str, interest_id: str) -> None:
        item = await db.get(UserInterest, (user_id, interest_id))
        if not item:
            raise NotFoundError("User interest not found")
        await db.delete(item)
        await db.commit()


interest_service = InterestService()
