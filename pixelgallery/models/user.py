

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from pixelgallery.db.base import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    User model keyed by an opaque caller subject.

    Uses auth_sub (the subject extracted from the Authorization header) as
    the unique identity instead of email/password. Carries the timer
    configuration used by the drawing client.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    auth_sub = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    picture = Column(String, nullable=True)

    # Timer configuration
    is_custom_time = Column(Boolean, default=False, nullable=False)
    custom_time_alarm = Column(String, nullable=True)
    today_time = Column(DateTime(timezone=True), default=_utc_now, nullable=True)
    time_length = Column(Integer, default=10, nullable=False)
    pixel_amount = Column(Integer, default=10, nullable=False)
