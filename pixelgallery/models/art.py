

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from pixelgallery.db.base import Base


class Art(Base):
    """
    Art model representing a single artwork record.

    Owned by exactly one user for its whole life. previous_art_id points to
    an earlier Art it supersedes; it is deliberately not a foreign key, so
    deleting the earlier Art leaves a dangling reference instead of failing
    or cascading.
    """

    __tablename__ = "arts"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    image = Column(String, nullable=True)
    title = Column(String, nullable=True)
    comments = Column(Text, default="[]", nullable=False)  # JSON-encoded list
    modified_date = Column(DateTime(timezone=True), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
    previous_art_id = Column(Integer, nullable=True)

    def touch(self) -> None:
        """Stamp the modification time with the current UTC time."""
        self.modified_date = datetime.now(timezone.utc)
