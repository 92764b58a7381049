"""
Hangout Service - Hangout events and visibility grants

Translates listing filters into SQL predicates and owns the
create/update/delete rules for hangouts and their visibility rows.
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gotogether.models.hangout import Hangout, HangoutVisibility
from gotogether.models.interest import UserInterest
from gotogether.schemas.hangout import HangoutFilters, utc_naive
from gotogether.services.exceptions import NotFoundError, ValidationError
from gotogether.services.user_service import user_service

logger = logging.getLogger(__name__)

ORDER_COLUMNS = {
    "startsAt": Hangout.starts_at,
    "endsAt": Hangout.ends_at,
    "createdAt": Hangout.created_at,
    "title": Hangout.title,
}


def build_hangout_query(filters: HangoutFilters):
    """Build the filtered, ordered and paginated SELECT for ``filters``."""
    stmt = select(Hangout)

    if filters.user_id:
        stmt = stmt.where(Hangout.user_id == filters.user_id)
    if filters.title:
        stmt = stmt.where(Hangout.title.ilike(f"%{filters.title}%"))
    if filters.is_public is not None:
        stmt = stmt.where(Hangout.is_public == filters.is_public)

    if filters.starts_at_from:
        stmt = stmt.where(Hangout.starts_at >= filters.starts_at_from)
    if filters.starts_at_to:
        stmt = stmt.where(Hangout.starts_at <= filters.starts_at_to)
    if filters.ends_at_from:
        stmt = stmt.where(Hangout.ends_at >= filters.ends_at_from)
    if filters.ends_at_to:
        stmt = stmt.where(Hangout.ends_at <= filters.ends_at_to)

    if filters.lat_min is not None:
        stmt = stmt.where(Hangout.latitude >= filters.lat_min)
    if filters.lat_max is not None:
        stmt = stmt.where(Hangout.latitude <= filters.lat_max)
    if filters.lng_min is not None:
        stmt = stmt.where(Hangout.longitude >= filters.lng_min)
    if filters.lng_max is not None:
        stmt = stmt.where(Hangout.longitude <= filters.lng_max)

    # Hangouts whose owner picked the interest
    if filters.interest_id:
        stmt = stmt.where(
            select(UserInterest.user_id)
            .where(
                UserInterest.user_id == Hangout.user_id,
                UserInterest.interest_id == filters.interest_id,
            )
            .exists()
        )

    column = ORDER_COLUMNS[filters.order_by]
    stmt = stmt.order_by(column.desc() if filters.order_dir == "desc" else column.asc())

    return stmt.offset((filters.page - 1) * filters.limit).limit(filters.limit)


class HangoutService:
    """Service for hangouts and their visibility rows."""

    @staticmethod
    async def list_hangouts(db: AsyncSession, filters: HangoutFilters) -> List[Hangout]:
        result = await db.execute(build_hangout_query(filters))
        return list(result.scalars().all())

    @staticmethod
    async def get_or_fail(db: AsyncSession, hangout_id: str, with_visibility: bool = False) -> Hangout:
        stmt = select(Hangout).where(Hangout.id == hangout_id)
        if with_visibility:
            stmt = stmt.options(selectinload(Hangout.visibility)).execution_options(
                populate_existing=True
            )
        result = await db.execute(stmt)
        hangout = result.scalar_one_or_none()
        if not hangout:
            raise NotFoundError("Hangout not found")
        return hangout

    @staticmethod
    async def create(db: AsyncSession, user_id: str, **fields) -> Hangout:
        await user_service.get_or_fail(db, user_id)

        hangout = Hangout(user_id=user_id, **fields)
        db.add(hangout)
        await db.commit()
        await db.refresh(hangout)
        logger.info(f"Hangout {hangout.id} created by {user_id}")
        return hangout

    @staticmethod
    async def update(db: AsyncSession, hangout_id: str, **fields) -> Hangout:
        hangout = await HangoutService.get_or_fail(db, hangout_id)
        for name, value in fields.items():
            setattr(hangout, name, value)

        if hangout.ends_at is not None and utc_naive(hangout.ends_at) < utc_naive(hangout.starts_at):
            await db.rollback()
            raise ValidationError("endsAt must not be before startsAt")

        await db.commit()
        await db.refresh(hangout)
        return hangout

    @staticmethod
    async def delete(db: AsyncSession, hangout_id: str) -> None:
        hangout = await HangoutService.get_or_fail(db, hangout_id)
        await db.delete(hangout)
        await db.commit()
        logger.info(f"Hangout {hangout_id} deleted")

    @staticmethod
    async def list_visibility(db: AsyncSession, hangout_id: str) -> List[HangoutVisibility]:
        result = await db.execute(
            select(HangoutVisibility)
            .where(HangoutVisibility.hangout_id == hangout_id)
            .order_by(HangoutVisibility.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def add_visibility(db: AsyncSession, hangout_id: str, category_id=None, user_id=None) -> HangoutVisibility:
        if not category_id and not user_id:
            raise ValidationError("Provide categoryId or userId")
        await HangoutService.get_or_fail(db, hangout_id)

        visibility = HangoutVisibility(hangout_id=hangout_id, category_id=category_id, user_id=user_id)
        db.add(visibility)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise NotFoundError("Category or user not found") from e
        await db.refresh(visibility)
        return visibility

    @staticmethod
    async def remove_visibility(db: AsyncSession, hangout_id: str, visibility_id: str) -> None:
        result = await db.execute(
            select(HangoutVisibility).where(
                HangoutVisibility.id == visibility_id,
                HangoutVisibility.hangout_id == hangout_id,
            )
        )
        visibility = result.scalar_one_or_none()
        if not visibility:
            raise NotFoundError("Visibility entry not found")
        await db.delete(visibility)
        await db.commit()


hangout_service = HangoutService()
