

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pixelgallery.models.art import Art
from pixelgallery.utils.serializers import dump_comments


logger = logging.getLogger(__name__)


class ArtService:
    """Service class for art records."""

    @staticmethod
    async def get_art(art_id: int, db: AsyncSession) -> Optional[Art]:
        result = await db.execute(select(Art).where(Art.id == art_id))
        return result.scalars().first()

    @staticmethod
    async def create_art(user_id: int, db: AsyncSession) -> Art:
        """
        Create an empty art owned by user_id.

        Content fields start empty and are filled through PATCH/PUT.
        """
        art = Art(
            user_id=user_id,
            image=None,
            title=None,
            comments=dump_comments([]),
            modified_date=datetime.now(timezone.utc),
            previous_art_id=None,
            is_public=False,
        )
        db.add(art)
        await db.commit()
        await db.refresh(art)

        logger.info(f"Created art {art.id} for user {user_id}")
        return art

    @staticmethod
    async def list_arts(
        db: AsyncSession,
        offset: int = 0,
        limit: int = 5
    ) -> tuple[int, List[Art]]:
        """
        Get one page of arts ordered by id.

        Returns:
            Tuple of (total_count, list_of_arts).
        """
        total = (await db.execute(select(func.count()).select_from(Art))).scalar_one()

        result = await db.execute(
            select(Art)
            .order_by(Art.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return total, list(result.scalars().all())

    @staticmethod
    async def update_art(art: Art, changes: Dict[str, Any], db: AsyncSession) -> Art:
        """
        Apply validated column changes and stamp modified_date.

        Args:
            art: Art to update.
            changes: Column name -> new value, as produced by the validators.
            db: Database session.
        """
        for column, value in changes.items():
            setattr(art, column, value)
        art.touch()

        await db.commit()
        await db.refresh(art)

        logger.info(f"Updated art {art.id}: {sorted(changes)}")
        return art

    @staticmethod
    async def delete_art(art: Art, db: AsyncSession) -> None:
        """Delete an art; arts pointing at it through previous_art_id keep the stale id."""
        await db.delete(art)
        await db.commit()
        logger.info(f"Deleted art {art.id}")
