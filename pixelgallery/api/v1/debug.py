"""
Development-only inspection endpoints.

Mounted by the application factory only when ENABLE_DEBUG_ROUTES is set.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pixelgallery.core.config import Settings
from pixelgallery.db.session import get_db
from pixelgallery.dependencies.settings import get_settings
from pixelgallery.models.art import Art
from pixelgallery.models.friendship import Friendship
from pixelgallery.models.gallery import Gallery
from pixelgallery.models.gallery_art import GalleryArt
from pixelgallery.models.user import User
from pixelgallery.services.gallery_service import GalleryService
from pixelgallery.services.user_service import UserService
from pixelgallery.utils.serializers import art_to_response, gallery_to_response, user_to_response


logger = logging.getLogger(__name__)

debug_router = APIRouter()

# Edges first so no row is removed while something still points at it
_RESET_ORDER = (GalleryArt, Friendship, Art, Gallery, User)


@debug_router.get("/db")
async def inspect_db(db: AsyncSession = Depends(get_db)):
    """Table names and row counts."""
    counts = {}
    for model in reversed(_RESET_ORDER):
        table = model.__tablename__
        counts[table] = (await db.execute(select(func.count()).select_from(model))).scalar_one()

    return {"tables": list(counts), "counts": counts}


@debug_router.post("/reset")
async def reset_db(db: AsyncSession = Depends(get_db)):
    """Delete every row in every table."""
    for model in _RESET_ORDER:
        await db.execute(delete(model))
    await db.commit()

    logger.warning("Debug reset removed all rows")
    return {"ok": True}


@debug_router.get("/serialize")
async def serialize_latest(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Projections of the most recently created user, art and gallery."""
    base_url = settings.api_base_url

    user = (await db.execute(select(User).order_by(User.id.desc()).limit(1))).scalars().first()
    art = (await db.execute(select(Art).order_by(Art.id.desc()).limit(1))).scalars().first()
    gallery = (await db.execute(select(Gallery).order_by(Gallery.id.desc()).limit(1))).scalars().first()

    user_out = None
    if user is not None:
        friends = await UserService.get_friends(user.id, db)
        user_out = user_to_response(user, friends, base_url).model_dump(by_alias=True)

    gallery_out = None
    if gallery is not None:
        arts = await GalleryService.get_gallery_arts(gallery.id, db)
        gallery_out = gallery_to_response(gallery, arts, base_url).model_dump(by_alias=True)

    return {
        "user": user_out,
        "art": art_to_response(art, base_url).model_dump(by_alias=True) if art is not None else None,
        "gallery": gallery_out,
    }
