import unittest

from freeeats.core.exceptions import AuthorizationError, ResourceNotFoundError
from freeeats.models import Notification, NotificationType
from freeeats.services.notification import NotificationService
from tests.helpers import DatabaseTestCase


class TestNotificationService(DatabaseTestCase):

    def setUp(self):
        super().setUp()
        self.service = NotificationService(self.db)
        self.campus = self.make_campus()
        self.bob = self.make_user("user_bob", "Bob")
        self.alice = self.make_user("user_alice", "Alice")

    def _notify(self, user, title="Pizza", creation_time=None, is_read=False):
        post = self.make_post(user, self.campus, title)
        values = dict(
            user_id=user.id,
            type=NotificationType.FOOD_REPORTED_GONE,
            food_post_id=post.id,
            food_title=title,
            report_count=1,
            is_read=is_read,
        )
        if creation_time is not None:
            values["creation_time"] = creation_time
        notification = Notification(**values)
        self.db.add(notification)
        self.db.commit()
        return notification

    def test_recent_notifications_newest_first(self):
        self._notify(self.bob, "Old", creation_time=1000)
        self._notify(self.bob, "New", creation_time=2000)
        self._notify(self.alice, "Not Bob's")

        titles = [n.food_title for n in self.service.list_for_user(self.bob)]
        self.assertEqual(titles, ["New", "Old"])

    def test_list_is_capped(self):
        for i in range(25):
            self._notify(self.bob, f"Post {i}", creation_time=1000 + i)

        notifications = self.service.list_for_user(self.bob)
        self.assertEqual(len(notifications), 20)
        self.assertEqual(notifications[0].food_title, "Post 24")

    def test_anonymous_caller(self):
        self.assertEqual(self.service.list_for_user(None), [])
        self.assertEqual(self.service.unread_count(None), 0)

    def test_unread_count(self):
        self._notify(self.bob, "A")
        self._notify(self.bob, "B", is_read=True)
        self._notify(self.alice, "C")
        self.assertEqual(self.service.unread_count(self.bob), 1)

    def test_mark_as_read(self):
        notification = self._notify(self.bob)
        self.service.mark_as_read(self.bob, notification.id)
        self.assertEqual(self.service.unread_count(self.bob), 0)

    def test_only_recipient_marks_read(self):
        notification = self._notify(self.bob)
        with self.assertRaises(AuthorizationError):
            self.service.mark_as_read(self.alice, notification.id)
        self.assertEqual(self.service.unread_count(self.bob), 1)

    def test_mark_missing_notification(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.mark_as_read(self.bob, "missing")

    def test_mark_all_as_read(self):
        self._notify(self.bob, "A")
        self._notify(self.bob, "B")
        self._notify(self.alice, "C")

        self.assertEqual(self.service.mark_all_as_read(self.bob), 2)
        self.assertEqual(self.service.unread_count(self.bob), 0)
        self.assertEqual(self.service.unread_count(self.alice), 1)


if __name__ == "__main__":
    unittest.main()
