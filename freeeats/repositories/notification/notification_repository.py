"""
Notification repository.
"""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from freeeats.core.exceptions import RepositoryError
from freeeats.models.notification import Notification
from freeeats.repositories.base.base_repository import BaseRepository


class NotificationRepository(BaseRepository[Notification]):

    def __init__(self, db: Session):
        super().__init__(Notification, db)

    def find_for_post(self, user_id: str, food_post_id: str) -> Optional[Notification]:
        return self.find_one_by_criteria({"user_id": user_id, "food_post_id": food_post_id})

    def list_recent(self, user_id: str, limit: int = 20) -> List[Notification]:
        return self.find_by_criteria(
            {"user_id": user_id}, limit=limit, order_by=["-creation_time", "id"]
        )

    def count_unread(self, user_id: str) -> int:
        return self.count({"user_id": user_id, "is_read": False})

    def mark_all_read(self, user_id: str) -> int:
        """Flag every unread notification of a user as read; returns the row count."""
        try:
            count = (
                self.db.query(Notification)
                .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
                .update({Notification.is_read: True}, synchronize_session="fetch")
            )
            self.db.flush()
            return count
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Mark all read failed: {str(e)}") from e
