"""
User endpoints.

Handles idempotent registration, self access, deletion, directed
friendships and the daily timer refresh.
"""

import logging
from typing import Any, Dict, List

import pydantic
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.config import Settings
from pixelgallery.core.exceptions import (
    USER_NOT_FOUND,
    AutoOnlyError,
    BodyRequiredError,
    ConflictError,
    NotFoundError,
    OwnershipError,
)
from pixelgallery.db.base import MAX_INTEGER
from pixelgallery.db.session import get_db
from pixelgallery.dependencies.auth import get_auth_subject
from pixelgallery.dependencies.body import no_body_allowed, require_json_body
from pixelgallery.dependencies.settings import get_settings
from pixelgallery.models.user import User
from pixelgallery.schemas.user import (
    TodayTimeRefresh,
    TodayTimeRefreshResponse,
    UserCreate,
    UserResponse,
)
from pixelgallery.services.ownership import NOT_THE_USER, OwnershipGuard
from pixelgallery.services.user_service import UserService
from pixelgallery.utils.serializers import user_to_response


logger = logging.getLogger(__name__)

users_router = APIRouter()

AUTO_REQUEST_METHOD = "automatically"


async def _user_response(user: User, db: AsyncSession, settings: Settings) -> UserResponse:
    friends = await UserService.get_friends(user.id, db)
    return user_to_response(user, friends, settings.api_base_url)


@users_router.post("", response_model=UserResponse)
async def create_user(
    response: Response,
    auth_sub: str = Depends(get_auth_subject),
    body: Dict[str, Any] = Depends(require_json_body),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register the caller, or return the existing user for this subject.

    Returns 201 when a user is created and 200 when one already exists.

    Raises:
        BodyRequiredError: If userinfo is missing or not an object.
        OwnershipError: If userinfo.sub names a different subject.
    """
    try:
        user_data = UserCreate.model_validate(body)
    except pydantic.ValidationError:
        raise BodyRequiredError()

    if user_data.userinfo.sub and user_data.userinfo.sub != auth_sub:
        raise OwnershipError(NOT_THE_USER)

    user, created = await UserService.get_or_create_user(auth_sub, user_data.userinfo, db)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return await _user_response(user, db, settings)


@users_router.get("", response_model=List[UserResponse], dependencies=[Depends(no_body_allowed)])
async def list_users(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List every user with their friends."""
    users = await UserService.list_users(db)
    return [await _user_response(user, db, settings) for user in users]


@users_router.patch("", response_model=TodayTimeRefreshResponse)
async def refresh_today_time(
    body: Dict[str, Any] = Depends(require_json_body),
    db: AsyncSession = Depends(get_db),
):
    """
    Stamp every user's Today_Time with the current time.

    Meant for a scheduler, which must send {"request_method": "automatically"}.
    """
    try:
        refresh = TodayTimeRefresh.model_validate(body)
    except pydantic.ValidationError:
        raise AutoOnlyError()

    if refresh.request_method != AUTO_REQUEST_METHOD:
        raise AutoOnlyError()

    now = await UserService.refresh_today_time(db)
    return TodayTimeRefreshResponse(ok=True, Today_Time=now)


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Fetch a user; only the user themself may read it."""
    user = await OwnershipGuard.check_self_access(user_id, auth_sub, db)
    return await _user_response(user, db, settings)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
):
    """Delete a user with their friendships, arts and galleries."""
    user = await OwnershipGuard.check_self_access(user_id, auth_sub, db)
    await UserService.delete_user(user, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@users_router.patch("/{user_id}/users/{friend_id}", response_model=UserResponse)
async def add_friend(
    user_id: int = Path(..., ge=1, le=MAX_INTEGER),
    friend_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Add the directed friendship user_id -> friend_id.

    Raises:
        ConflictError: On a self friendship or an existing edge.
        NotFoundError: If either user does not exist.
        OwnershipError: If the caller is not user_id.
    """
    if user_id == friend_id:
        raise ConflictError("A user cannot friend themselves")

    user = await OwnershipGuard.check_self_access(user_id, auth_sub, db)

    if await UserService.get_user_by_id(friend_id, db) is None:
        raise NotFoundError(USER_NOT_FOUND)

    await UserService.add_friend(user.id, friend_id, db)
    return await _user_response(user, db, settings)


@users_router.delete("/{user_id}/users/{friend_id}", response_model=UserResponse)
async def remove_friend(
    user_id: int = Path(..., ge=1, le=MAX_INTEGER),
    friend_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Remove the directed friendship user_id -> friend_id."""
    if user_id == friend_id:
        raise ConflictError("A user cannot friend themselves")

    user = await OwnershipGuard.check_self_access(user_id, auth_sub, db)
    await UserService.remove_friend(user.id, friend_id, db)
    return await _user_response(user, db, settings)
