"""
Gallery endpoints.

Creation, paged listing, owner-only reads and updates, deletion, and
management of the arts a gallery contains.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.config import Settings
from pixelgallery.core.exceptions import OwnershipError
from pixelgallery.db.base import MAX_INTEGER
from pixelgallery.db.session import get_db
from pixelgallery.dependencies.auth import get_auth_subject
from pixelgallery.dependencies.body import json_body, no_body_allowed
from pixelgallery.dependencies.settings import get_settings
from pixelgallery.models.gallery import Gallery
from pixelgallery.schemas.art import ArtResponse
from pixelgallery.schemas.gallery import GalleryPage, GalleryResponse
from pixelgallery.services.gallery_service import GalleryService
from pixelgallery.services.ownership import NOT_THE_USER, OwnershipGuard
from pixelgallery.services.user_service import UserService
from pixelgallery.services.validation import validate_gallery_patch, validate_gallery_put
from pixelgallery.utils.pagination import next_link
from pixelgallery.utils.serializers import art_to_response, gallery_to_response


logger = logging.getLogger(__name__)

galleries_router = APIRouter()


async def _gallery_response(gallery: Gallery, db: AsyncSession, settings: Settings) -> GalleryResponse:
    arts = await GalleryService.get_gallery_arts(gallery.id, db)
    return gallery_to_response(gallery, arts, settings.api_base_url)


@galleries_router.post("", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED)
async def create_gallery(
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create an empty gallery owned by the caller."""
    user = await UserService.get_user_by_auth_sub(auth_sub, db)
    if user is None:
        raise OwnershipError(NOT_THE_USER)

    gallery = await GalleryService.create_gallery(user.id, db)
    return gallery_to_response(gallery, [], settings.api_base_url)


@galleries_router.get("", response_model=GalleryPage, dependencies=[Depends(no_body_allowed)])
async def list_galleries(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_INTEGER),
    offset: int = Query(default=0, ge=0, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List galleries page by page, ordered by id, each with its member arts."""
    limit = limit or settings.default_page_limit
    total, galleries = await GalleryService.list_galleries(db, offset=offset, limit=limit)

    return GalleryPage(
        items=[await _gallery_response(gallery, db, settings) for gallery in galleries],
        next=next_link("/galleries", limit, offset, total, settings.api_base_url),
    )


@galleries_router.get("/{gallery_id}", response_model=GalleryResponse)
async def get_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Fetch a gallery owned by the caller, with its member arts."""
    ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    return await _gallery_response(ownership.resource, db, settings)


@galleries_router.patch("/{gallery_id}", response_model=GalleryResponse)
async def patch_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Partially update G_Name, G_Profile, G_Comments and G_Is_Public."""
    ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    changes = validate_gallery_patch(body)

    gallery = await GalleryService.update_gallery(ownership.resource, changes, db)
    return await _gallery_response(gallery, db, settings)


@galleries_router.put("/{gallery_id}", response_model=GalleryResponse)
async def put_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    body: Any = Depends(json_body),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Replace all four gallery fields."""
    ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    changes = validate_gallery_put(body)

    gallery = await GalleryService.update_gallery(ownership.resource, changes, db)
    return await _gallery_response(gallery, db, settings)


@galleries_router.delete("/{gallery_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
):
    """Delete a gallery owned by the caller. Member arts are kept."""
    ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    await GalleryService.delete_gallery(ownership.resource, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@galleries_router.get("/{gallery_id}/arts", response_model=List[ArtResponse])
async def list_gallery_arts(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List the arts in a gallery owned by the caller, ordered by art id."""
    await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    arts = await GalleryService.get_gallery_arts(gallery_id, db)
    return [art_to_response(art, settings.api_base_url) for art in arts]


@galleries_router.patch("/{gallery_id}/arts/{art_id}", response_model=GalleryResponse)
async def add_art_to_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Put an art into a gallery. The caller must own both.

    Raises:
        ConflictError: If the art is already in the gallery.
    """
    gallery_ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)

    await GalleryService.add_art(gallery_id, art_id, db)
    return await _gallery_response(gallery_ownership.resource, db, settings)


@galleries_router.delete("/{gallery_id}/arts/{art_id}", response_model=GalleryResponse)
async def remove_art_from_gallery(
    gallery_id: int = Path(..., ge=1, le=MAX_INTEGER),
    art_id: int = Path(..., ge=1, le=MAX_INTEGER),
    auth_sub: str = Depends(get_auth_subject),
    _: None = Depends(no_body_allowed),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Take an art out of a gallery. The caller must own both.

    Raises:
        ConflictError: If the art is not in the gallery.
    """
    gallery_ownership = await OwnershipGuard.check_gallery_ownership(gallery_id, auth_sub, db)
    await OwnershipGuard.check_art_ownership(art_id, auth_sub, db)

    await GalleryService.remove_art(gallery_id, art_id, db)
    return await _gallery_response(gallery_ownership.resource, db, settings)
