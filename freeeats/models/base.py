"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base, a UUID string primary key and the
timestamp mixins shared by all models.
"""

import re
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import BigInteger, Column, DateTime, String
from sqlalchemy.orm import declarative_base, declared_attr

from freeeats.utils.datetime_utils import now_ms

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract base model with a UUID string primary key.
    """

    __abstract__ = True

    id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="Primary key (UUID)"
    )

    @declared_attr
    def __tablename__(cls) -> str:
        """Generate table name from class name."""
        name = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', cls.__name__)
        return re.sub('([a-z0-9])([A-Z])', r'\1_\2', name).lower() + 's'

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """
    Mixin for creation/update tracking.

    creation_time is epoch milliseconds, the unit used on the wire and by
    feed ordering; updated_at is a regular timezone-aware timestamp.
    """

    creation_time = Column(
        BigInteger,
        nullable=False,
        default=now_ms,
        index=True,
        comment="Record creation time (epoch ms)"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="Record last update timestamp (UTC)"
    )
