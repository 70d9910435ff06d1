"""
Art endpoints.

Creation, paged listing, owner-only reads, partial and full updates, and
deletion of art records.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.config import Settings
from pixelgallery.core.exceptions import OwnershipError
from pixelgallery.db.base import MAX_INTEGER
from pixelgallery.db.session import get_db
from pixelgallery.dependencies.auth import get_auth_subject
from pixelgallery.dependencies.body import json_body, no_body_allowed
from pixelgallery.dependencies.settings import get_settings
from pixelgallery.schemas.art import ArtPage, ArtResponse
from pixelgallery.services.art_service import ArtService
from pixelgallery.services.ownership import NOT_THE_USER, OwnershipGuard
from pixelgallery.services.user_service import UserService
from pixelgallery.services.validation import validate_art_patch, validate_art_put
from pixelgallery.utils.pagination import next_link
from pixelgallery.utils.serializers import art_to_response


logger = logging.getLogger(__name__)

arts_router = APIRouter()


@arts_router.post("", response_model=ArtResponse, status_code=status.HTTP_201_CREATED)
async def create_art(
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create an empty art owned by the caller."""
    user = await UserService.get_user_by_auth_sub(auth_sub, db)
    if user is None:
        raise OwnershipError(NOT_THE_USER)

    art = await ArtService.create_art(user.id, db)
    return art_to_response(art, settings.api_base_url)


@arts_router.get("", response_model=ArtPage, dependencies=[Depends(no_body_allowed)])
async def list_arts(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_INTEGER),
    offset: int = Query(default=0, ge=0, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    List arts page by page, ordered by id.

    Returns:
        ArtPage: The page items and the next page link (null on the last page).
    """
    limit = limit or settings.default_page_limit
    total, arts = await ArtService.list_arts(db, offset=offset, limit=limit)

    return ArtPage(
        items=[art_to_response(art, settings.api_base_url) for art in arts],
        next=next_link("/arts", limit, offset, total, settings.api_base_url),
    )


@arts_router.get("/{art_id}", response_model=ArtResponse)
async def get_art(
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Fetch an art owned by the caller."""
    ownership = await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)
    return art_to_response(ownership.resource, settings.api_base_url)


@arts_router.patch("/{art_id}", response_model=ArtResponse)
async def patch_art(
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Partially update an art owned by the caller.

    Accepts A_Title, A_Image, A_Comments, A_Is_Public and A_Previous.
    """
    ownership = await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)
    changes = await validate_art_patch(body, db)

    art = await ArtService.update_art(ownership.resource, changes, db)
    return art_to_response(art, settings.api_base_url)


@arts_router.put("/{art_id}", response_model=ArtResponse)
async def put_art(
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Replace an art owned by the caller.

    Requires A_Title, A_Comments and A_Is_Public; A_Image is optional.
    """
    ownership = await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)
    changes = validate_art_put(body, ownership.resource)

    art = await ArtService.update_art(ownership.resource, changes, db)
    return art_to_response(art, settings.api_base_url)


@arts_router.delete("/{art_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_art(
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
):
    """Delete an art owned by the caller."""
    ownership = await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)
    await ArtService.delete_art(ownership.resource, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
