

from sqlalchemy.orm import DeclarativeBase


# Largest value a SQLite INTEGER / Postgres BIGINT column can bind
MAX_INTEGER = 2**63 - 1


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""
