"""
Food post model.
"""

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)

from freeeats.models.base import BaseModel, TimestampMixin
from freeeats.models.enums import FoodType


class FoodPost(BaseModel, TimestampMixin):
    """
    A time-bounded listing of free food.

    Expiry is not enforced by storage: readers compare expires_at with the
    current time. reported_by holds the ids of users who flagged the food as
    gone and gone_reports always equals its length.
    """

    __tablename__ = "food_posts"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    food_type = Column(
        Enum(FoodType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )

    # Location
    campus_id = Column(
        String(36),
        ForeignKey("campuses.id", ondelete="CASCADE"),
        nullable=False,
    )
    location_name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    expires_at = Column(BigInteger, nullable=False, index=True, comment="Expiry (epoch ms)")
    image_id = Column(String(36), nullable=True, comment="Stored file id")

    created_by = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_active = Column(Boolean, nullable=False, default=True)
    dietary_tags = Column(JSON, nullable=True)
    marked_gone_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    gone_reports = Column(Integer, nullable=True, default=0)
    reported_by = Column(JSON, nullable=True)

    __table_args__ = (
        Index("ix_food_posts_campus_active", "campus_id", "is_active"),
    )
