

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from pixelgallery.db.base import Base


class Gallery(Base):
    """
    Gallery model representing a curated collection of arts.

    creation_date is set once when the gallery is created and never updated.
    """

    __tablename__ = "galleries"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=True)
    profile = Column(String, nullable=True)
    comments = Column(Text, default="[]", nullable=False)  # JSON-encoded list
    creation_date = Column(DateTime(timezone=True), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
