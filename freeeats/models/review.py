"""
Review model.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text, UniqueConstraint

from freeeats.models.base import BaseModel, TimestampMixin


class Review(BaseModel, TimestampMixin):
    """A 1-5 star review of a food post, one per (post, user)."""

    __tablename__ = "reviews"

    food_post_id = Column(
        String(36),
        ForeignKey("food_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    image_id = Column(String(36), nullable=True)

    __table_args__ = (
        UniqueConstraint("food_post_id", "user_id", name="uq_reviews_food_post_user"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )
