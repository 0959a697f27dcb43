"""
Database models package.
"""

from freeeats.models.base import Base, BaseModel, TimestampMixin
from freeeats.models.enums import DietaryTag, FileStatus, FoodType, NotificationType
from freeeats.models.campus import Campus
from freeeats.models.user import User
from freeeats.models.food_post import FoodPost
from freeeats.models.review import Review
from freeeats.models.notification import Notification
from freeeats.models.stored_file import StoredFile

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "DietaryTag",
    "FileStatus",
    "FoodType",
    "NotificationType",
    "Campus",
    "User",
    "FoodPost",
    "Review",
    "Notification",
    "StoredFile",
]
