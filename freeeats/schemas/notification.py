"""
Notification schemas.
"""

from __future__ import annotations

from typing import Optional

from freeeats.models.enums import NotificationType
from freeeats.schemas.common import BaseResponseSchema, BaseSchema

__all__ = ["NotificationResponse", "UnreadCount"]


class NotificationResponse(BaseResponseSchema):
    user_id: str
    type: NotificationType
    food_post_id: str
    food_title: str
    report_count: Optional[int] = None
    is_read: bool


class UnreadCount(BaseSchema):
    count: int
