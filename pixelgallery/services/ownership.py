"""
Ownership checks for arts, galleries and users.

Existence is always checked before the caller is resolved, so a request
for a missing resource yields NotFoundError no matter who is asking.
"""

import logging
from dataclasses import dataclass
from typing import Any, Type

from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.exceptions import (
    ART_NOT_FOUND,
    GALLERY_NOT_FOUND,
    USER_NOT_FOUND,
    NotFoundError,
    OwnershipError,
)
from pixelgallery.models.art import Art
from pixelgallery.models.gallery import Gallery
from pixelgallery.models.user import User
from pixelgallery.services.user_service import UserService


logger = logging.getLogger(__name__)

NOT_THE_USER = "You are not the user"


@dataclass
class Ownership:
    """Successful ownership check: the resource and its resolved owner."""
    resource: Any
    owner: User


class OwnershipGuard:
    """Resolves whether a caller subject may act on a resource."""

    @staticmethod
    async def check_ownership(
        model: Type[Any],
        resource_id: int,
        caller_sub: str,
        db: AsyncSession,
        not_found_message: str,
        not_owner_message: str,
    ) -> Ownership:
        """
        Check that the caller owns an owned resource (anything with user_id).

        Args:
            model: ORM model class, e.g. Art or Gallery.
            resource_id: Primary key of the resource.
            caller_sub: Subject extracted from the Authorization header.
            db: Database session.
            not_found_message: Error message when the resource is absent.
            not_owner_message: Error message on owner mismatch.

        Returns:
            Ownership: The resource and the caller's user row.

        Raises:
            NotFoundError: If the resource does not exist.
            OwnershipError: If the caller is not a known user or not the owner.
        """
        resource = await db.get(model, resource_id)
        if resource is None:
            raise NotFoundError(not_found_message)

        caller = await UserService.get_user_by_auth_sub(caller_sub, db)
        if caller is None:
            raise OwnershipError(NOT_THE_USER)

        if resource.user_id != caller.id:
            logger.info(f"User {caller.id} denied access to {model.__tablename__} {resource_id}")
            raise OwnershipError(not_owner_message)

        return Ownership(resource=resource, owner=caller)

    @staticmethod
    async def check_art_ownership(art_id: int, caller_sub: str, db: AsyncSession) -> Ownership:
        return await OwnershipGuard.check_ownership(
            Art,
            art_id,
            caller_sub,
            db,
            not_found_message=ART_NOT_FOUND,
            not_owner_message="Art does not belong to the user",
        )

    @staticmethod
    async def check_gallery_ownership(gallery_id: int, caller_sub: str, db: AsyncSession) -> Ownership:
        return await OwnershipGuard.check_ownership(
            Gallery,
            gallery_id,
            caller_sub,
            db,
            not_found_message=GALLERY_NOT_FOUND,
            not_owner_message="Gallery does not belong to the user",
        )

    @staticmethod
    async def check_self_access(user_id: int, caller_sub: str, db: AsyncSession) -> User:
        """
        Check that the caller is the user identified by user_id.

        The user row is the identity, so its auth_sub is compared directly.

        Raises:
            NotFoundError: If no user has this id.
            OwnershipError: If the user's auth_sub differs from the caller's.
        """
        user = await UserService.get_user_by_id(user_id, db)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        if user.auth_sub != caller_sub:
            raise OwnershipError(NOT_THE_USER)

        return user
