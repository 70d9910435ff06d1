

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pixelgallery.core.exceptions import ConflictError
from pixelgallery.models.art import Art
from pixelgallery.models.gallery import Gallery
from pixelgallery.models.gallery_art import GalleryArt
from pixelgallery.utils.serializers import dump_comments


logger = logging.getLogger(__name__)


class GalleryService:
    """Service class for galleries and their art memberships."""

    @staticmethod
    async def get_gallery(gallery_id: int, db: AsyncSession) -> Optional[Gallery]:
        result = await db.execute(select(Gallery).where(Gallery.id == gallery_id))
        return result.scalars().first()

    @staticmethod
    async def create_gallery(user_id: int, db: AsyncSession) -> Gallery:
        """Create an empty gallery owned by user_id."""
        gallery = Gallery(
            user_id=user_id,
            name=None,
            profile=None,
            comments=dump_comments([]),
            creation_date=datetime.now(timezone.utc),
            is_public=False,
        )
        db.add(gallery)
        await db.commit()
        await db.refresh(gallery)

        logger.info(f"Created gallery {gallery.id} for user {user_id}")
        return gallery

    @staticmethod
    async def list_galleries(
        db: AsyncSession,
        offset: int = 0,
        limit: int = 5
    ) -> tuple[int, List[Gallery]]:
        """
        Get one page of galleries ordered by id.

        Returns:
            Tuple of (total_count, list_of_galleries).
        """
        total = (await db.execute(select(func.count()).select_from(Gallery))).scalar_one()

        result = await db.execute(
            select(Gallery)
            .order_by(Gallery.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def update_gallery(gallery: Gallery, changes: Dict[str, Any], db: AsyncSession) -> Gallery:
        """Apply validated column changes. creation_date is never touched."""
        for column, value in changes.items():
            setattr(gallery, column, value)

        await db.commit()
        await db.refresh(gallery)

        logger.info(f"Updated gallery {gallery.id}: {sorted(changes)}")
        return gallery

    @staticmethod
    async def delete_gallery(gallery: Gallery, db: AsyncSession) -> None:
        await db.delete(gallery)
        await db.commit()
        logger.info(f"Deleted gallery {gallery.id}")

    @staticmethod
    async def get_gallery_arts(gallery_id: int, db: AsyncSession) -> List[Art]:
        """Member arts of a gallery, ordered by art id."""
        result = await db.execute(
            select(Art)
            .join(GalleryArt, GalleryArt.art_id == Art.id)
            .where(GalleryArt.gallery_id == gallery_id)
            .order_by(Art.id.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def membership_exists(gallery_id: int, art_id: int, db: AsyncSession) -> bool:
        result = await db.execute(
            select(GalleryArt.id).where(
                GalleryArt.gallery_id == gallery_id,
                GalleryArt.art_id == art_id
            )
        )
        return result.first() is not None

    @staticmethod
    async def add_art(gallery_id: int, art_id: int, db: AsyncSession) -> None:
        """
        Insert the membership edge gallery_id <- art_id.

        Raises:
            ConflictError: If the art is already in the gallery, including when
                a concurrent insert wins the unique constraint.
        """
        if await GalleryService.membership_exists(gallery_id, art_id, db):
            raise ConflictError("Art already exists in gallery")

        db.add(GalleryArt(gallery_id=gallery_id, art_id=art_id))
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning(f"Concurrent duplicate membership of art {art_id} in gallery {gallery_id}")
            raise ConflictError("Art already exists in gallery")

        logger.info(f"Added art {art_id} to gallery {gallery_id}")

    @staticmethod
    async def remove_art(gallery_id: int, art_id: int, db: AsyncSession) -> None:
        """
        Delete the membership edge.

        Raises:
            ConflictError: If the art is not in the gallery.
        """
        result = await db.execute(
            select(GalleryArt).where(
                GalleryArt.gallery_id == gallery_id,
                GalleryArt.art_id == art_id
            )
        )
        membership = result.scalars().first()
        if membership is None:
            raise ConflictError("Art is not in the gallery")

        await db.delete(membership)
        await db.commit()
        logger.info(f"Removed art {art_id} from gallery {gallery_id}")
