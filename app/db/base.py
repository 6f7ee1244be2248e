"""
SQLAlchemy declarative base. The schema itself is managed outside this service.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
