import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gotogether.models.user import User
from gotogether.services.exceptions import ConflictError, NotFoundError, ValidationError
from gotogether.services.protocols import IdentityClaims

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for centralized User retrieval and management.
    Eliminates duplicated select(User) queries across the app.
    """

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
        """
        Get user by ID.
        Returns None if not found (caller handles 404).
        """
        return await db.get(User, user_id)

    @staticmethod
    async def get_by_firebase_uid(db: AsyncSession, firebase_uid: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.firebase_uid == firebase_uid))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_or_fail(db: AsyncSession, user_id: str) -> User:
        user = await UserService.get_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    async def list_users(db: AsyncSession) -> list[User]:
        result = await db.execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def create(
        db: AsyncSession,
        firebase_uid: str,
        email: Optional[str] = None,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> User:
        if not firebase_uid:
            raise ValidationError("firebaseUid required")

        user = User(
            firebase_uid=firebase_uid,
            email=email,
            display_name=display_name,
            photo_url=photo_url,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError("User already exists") from e
        await db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    @staticmethod
    async def update(db: AsyncSession, user_id: str, **fields) -> User:
        user = await UserService.get_or_fail(db, user_id)
        for name, value in fields.items():
            setattr(user, name, value)
        await db.commit()
        await db.refresh(user)
        return user

    @staticmethod
    async def delete(db: AsyncSession, user_id: str) -> None:
        user = await UserService.get_or_fail(db, user_id)
        await db.delete(user)
        await db.commit()
        logger.info(f"Deleted user {user_id}")

    @staticmethod
    async def sync_from_identity(db: AsyncSession, claims: IdentityClaims) -> User:
        """
        Upsert the user for a verified identity.
        Profile fields always mirror the latest claims.
        """
        user = await UserService.get_by_firebase_uid(db, claims.uid)
        if user is None:
            user = User(firebase_uid=claims.uid)
            db.add(user)
            logger.info(f"Syncing new user for identity {claims.uid}")

        user.apply_identity(email=claims.email, name=claims.name, picture=claims.picture)
        await db.commit()
        await db.refresh(user)
        return user


user_service = UserService()
