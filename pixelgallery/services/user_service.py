

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pixelgallery.core.exceptions import ConflictError
from pixelgallery.models.friendship import Friendship
from pixelgallery.models.user import User
from pixelgallery.schemas.user import UserInfo


logger = logging.getLogger(__name__)


class UserService:
    """Service class for users and their friendship edges."""

    @staticmethod
    async def get_user_by_id(user_id: int, db: AsyncSession) -> Optional[User]:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()

    @staticmethod
    async def get_user_by_auth_sub(auth_sub: str, db: AsyncSession) -> Optional[User]:
        result = await db.execute(select(User).where(User.auth_sub == auth_sub))
        return result.scalars().first()

    @staticmethod
    async def list_users(db: AsyncSession) -> List[User]:
        result = await db.execute(select(User).order_by(User.id.asc()))
        return list(result.scalars().all())

    @staticmethod
    async def get_or_create_user(
        auth_sub: str,
        userinfo: UserInfo,
        db: AsyncSession
    ) -> tuple[User, bool]:
        """
        Return the user for auth_sub, creating it on first sight.

        Args:
            auth_sub: Caller subject.
            userinfo: Profile claims used only when creating.
            db: Database session.

        Returns:
            tuple: (User, created) where created is False for an existing user.
        """
        existing = await UserService.get_user_by_auth_sub(auth_sub, db)
        if existing:
            logger.info(f"Found existing user: {existing.id}")
            return existing, False

        user = User(
            auth_sub=auth_sub,
            name=userinfo.name,
            email=userinfo.email,
            picture=userinfo.picture,
            is_custom_time=False,
            custom_time_alarm=None,
            today_time=datetime.now(timezone.utc),
            time_length=10,
            pixel_amount=10,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            # A concurrent request registered the same subject first
            await db.rollback()
            existing = await UserService.get_user_by_auth_sub(auth_sub, db)
            if existing is None:
                raise
            return existing, False

        await db.refresh(user)
        logger.info(f"Created new user: {user.id}")
        return user, True

    @staticmethod
    async def delete_user(user: User, db: AsyncSession) -> None:
        """Delete a user; friendships, arts and galleries cascade in the database."""
        await db.delete(user)
        await db.commit()
        logger.info(f"Deleted user {user.id}")

    @staticmethod
    async def get_friends(user_id: int, db: AsyncSession) -> List[User]:
        """Users that user_id has befriended, ordered by id."""
        result = await db.execute(
            select(User)
            .join(Friendship, Friendship.friend_id == User.id)
            .where(Friendship.user_id == user_id)
            .order_by(User.id.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def friendship_exists(user_id: int, friend_id: int, db: AsyncSession) -> bool:
        result = await db.execute(
            select(Friendship.id).where(
                Friendship.user_id == user_id,
                Friendship.friend_id == friend_id
            )
        )
        return result.first() is not None

    @staticmethod
    async def add_friend(user_id: int, friend_id: int, db: AsyncSession) -> None:
        """
        Insert the directed edge user_id -> friend_id.

        Raises:
            ConflictError: If the edge already exists, including when a
                concurrent insert wins the unique constraint.
        """
        if await UserService.friendship_exists(user_id, friend_id, db):
            raise ConflictError("Friend already exists")

        db.add(Friendship(user_id=user_id, friend_id=friend_id))
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning(f"Concurrent duplicate friendship {user_id} -> {friend_id}")
            raise ConflictError("Friend already exists")

        logger.info(f"User {user_id} added friend {friend_id}")

    @staticmethod
    async def remove_friend(user_id: int, friend_id: int, db: AsyncSession) -> None:
        """
        Delete the directed edge user_id -> friend_id.

        Raises:
            ConflictError: If the edge does not exist.
        """
        result = await db.execute(
            select(Friendship).where(
                Friendship.user_id == user_id,
                Friendship.friend_id == friend_id
            )
        )
        edge = result.scalars().first()
        if edge is None:
            raise ConflictError("Friend does not exist")

        await db.delete(edge)
        await db.commit()
        logger.info(f"User {user_id} removed friend {friend_id}")

    @staticmethod
    async def refresh_today_time(db: AsyncSession) -> datetime:
        """Stamp every user's today_time with the current time."""
        now = datetime.now(timezone.utc)
        await db.execute(update(User).values(today_time=now))
        await db.commit()
        logger.info(f"Refreshed today_time for all users to {now.isoformat()}")
        return now
