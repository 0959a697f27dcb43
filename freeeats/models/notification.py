"""
In-app notification model.
"""

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Index, Integer, String, UniqueConstraint

from freeeats.models.base import BaseModel, TimestampMixin
from freeeats.models.enums import NotificationType


class Notification(BaseModel, TimestampMixin):
    """
    Notice delivered to a post creator.

    At most one row exists per (user, food post); it is updated in place as
    the report count changes.
    """

    __tablename__ = "notifications"

    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Recipient (the post creator)",
    )
    type = Column(
        Enum(NotificationType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )
    food_post_id = Column(
        String(36),
        ForeignKey("food_posts.id", ondelete="CASCADE"),
        nullable=False,
    )
    food_title = Column(String(200), nullable=False)
    report_count = Column(Integer, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("user_id", "food_post_id", name="uq_notifications_user_food_post"),
        Index("ix_notifications_user_read", "user_id", "is_read"),
    )
