

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, UniqueConstraint

from pixelgallery.db.base import Base


class Friendship(Base):
    """
    Directed friendship edge user_id -> friend_id.

    Not symmetric: befriending B from A does not create B -> A.
    """

    __tablename__ = "friends"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    friend_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("user_id", "friend_id", name="uq_friends_pair"),
        CheckConstraint("user_id <> friend_id", name="ck_friends_not_self"),
    )
