"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
