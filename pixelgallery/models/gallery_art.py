

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint

from pixelgallery.db.base import Base


class GalleryArt(Base):
    """Membership edge placing an art inside a gallery."""

    __tablename__ = "gallery_arts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gallery_id = Column(Integer, ForeignKey("galleries.id", ondelete="CASCADE"), nullable=False, index=True)
    art_id = Column(Integer, ForeignKey("arts.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("gallery_id", "art_id", name="uq_gallery_arts_pair"),
    )
