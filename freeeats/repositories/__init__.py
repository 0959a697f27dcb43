"""
Data access layer. One repository per aggregate, all built on BaseRepository.
"""

from freeeats.repositories.base import BaseRepository
from freeeats.repositories.campus import CampusRepository
from freeeats.repositories.food import FoodPostRepository
from freeeats.repositories.notification import NotificationRepository
from freeeats.repositories.review import ReviewRepository
from freeeats.repositories.storage import StoredFileRepository
from freeeats.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "CampusRepository",
    "FoodPostRepository",
    "NotificationRepository",
    "ReviewRepository",
    "StoredFileRepository",
    "UserRepository",
]
