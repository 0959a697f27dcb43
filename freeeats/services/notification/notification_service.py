"""
In-app notifications for post creators.

A creator holds at most one notification per post. It tracks the current
"gone" report count: created or refreshed (and marked unread) whenever the
count goes up, updated when it goes down, removed when it reaches zero.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from freeeats.core.exceptions import AuthorizationError
from freeeats.models.enums import NotificationType
from freeeats.models.food_post import FoodPost
from freeeats.models.notification import Notification
from freeeats.models.user import User
from freeeats.repositories.notification import NotificationRepository
from freeeats.schemas.notification import NotificationResponse
from freeeats.services.base import BaseService

RECENT_LIMIT = 20


class NotificationService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.repository = NotificationRepository(db_session)

    # ------------------------------------------------------------------ #
    # Fan-out; called inside the caller's transaction
    # ------------------------------------------------------------------ #
    def on_report_added(self, post: FoodPost, report_count: int) -> Notification:
        existing = self.repository.find_for_post(post.created_by, post.id)
        if existing is not None:
            return self.repository.update(existing, {
                "report_count": report_count,
                "is_read": False,
            })
        return self.repository.create(Notification(
            user_id=post.created_by,
            type=NotificationType.FOOD_REPORTED_GONE,
            food_post_id=post.id,
            food_title=post.title,
            report_count=report_count,
            is_read=False,
        ))

    def on_report_removed(self, post: FoodPost, report_count: int) -> Optional[Notification]:
        existing = self.repository.find_for_post(post.created_by, post.id)
        if existing is None:
            return None
        if report_count <= 0:
            self.repository.delete(existing)
            return None
        return self.repository.update(existing, {"report_count": report_count})

    # ------------------------------------------------------------------ #
    # Recipient operations
    # ------------------------------------------------------------------ #
    def list_for_user(self, user: Optional[User]) -> List[NotificationResponse]:
        """The 20 most recent notifications, newest first."""
        if user is None:
            return []
        return [
            NotificationResponse.model_validate(n)
            for n in self.repository.list_recent(user.id, RECENT_LIMIT)
        ]

    def unread_count(self, user: Optional[User]) -> int:
        if user is None:
            return 0
        return self.repository.count_unread(user.id)

    def mark_as_read(self, user: User, notification_id: str) -> None:
        with self.transaction():
            notification = self.repository.get_by_id(notification_id)
            if notification.user_id != user.id:
                raise AuthorizationError(
                    "Not authorized to update this notification",
                    action="mark_as_read",
                    resource="notification",
                )
            self.repository.update(notification, {"is_read": True})

    def mark_all_as_read(self, user: User) -> int:
        with self.transaction():
            count = self.repository.mark_all_read(user.id)
        self._logger.debug(f"Marked {count} notifications read for user {user.id}")
        return count
