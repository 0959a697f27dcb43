"""
User profile model.
"""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, String

from freeeats.models.base import BaseModel, TimestampMixin


class User(BaseModel, TimestampMixin):
    """
    One record per authenticated identity, created lazily on first sign-in.

    cuisine_preferences maps food type values to a 1-5 score;
    dietary_restrictions is a list of dietary tag values.
    """

    __tablename__ = "users"

    clerk_id = Column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Subject identifier from the identity provider",
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    image_url = Column(String(1024), nullable=True)
    campus_id = Column(
        String(36),
        ForeignKey("campuses.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    cuisine_preferences = Column(JSON, nullable=True)
    dietary_restrictions = Column(JSON, nullable=True)
    has_completed_onboarding = Column(Boolean, nullable=True)
