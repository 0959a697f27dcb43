import unittest

from freeeats.core.exceptions import EntityAlreadyExistsError, ResourceNotFoundError
from freeeats.models import User
from freeeats.repositories.user import UserRepository
from freeeats.services.base import BaseService
from tests.helpers import DatabaseTestCase


class TestBaseRepository(DatabaseTestCase):

    def setUp(self):
        super().setUp()
        self.repository = UserRepository(self.db)
        self.service = BaseService(self.db)

    def test_writes_are_flushed_not_committed(self):
        user = self.repository.create(User(clerk_id="user_1", name="Alex"))
        self.assertIsNotNone(self.repository.find_by_id(user.id))

        self.db.rollback()
        self.assertIsNone(self.repository.find_by_clerk_id("user_1"))

    def test_service_transaction_commits_repository_writes(self):
        with self.service.transaction():
            user = self.repository.create(User(clerk_id="user_1", name="Alex"))
            self.repository.update(user, {"name": "Alexandra"})

        self.db.rollback()
        self.assertEqual(self.repository.get_by_id(user.id).name, "Alexandra")

        with self.service.transaction():
            self.repository.delete(user)
        with self.assertRaises(ResourceNotFoundError):
            self.repository.get_by_id(user.id)

    def test_duplicate_is_reported(self):
        self.make_user("user_1")
        with self.assertRaises(EntityAlreadyExistsError):
            self.repository.create(User(clerk_id="user_1", name="Again"))

    def test_unknown_attribute_is_rejected(self):
        user = self.make_user("user_1")
        with self.assertRaises(AttributeError):
            self.repository.update(user, {"nickname": "Al"})

    def test_criteria_support_lists_and_descending_order(self):
        for clerk_id, name in (("user_1", "Ann"), ("user_2", "Ben"), ("user_3", "Cy")):
            self.make_user(clerk_id, name)
        users = self.repository.find_by_criteria(
            {"clerk_id": ["user_1", "user_3"]}, order_by=["-name"]
        )
        self.assertEqual([u.name for u in users], ["Cy", "Ann"])


if __name__ == "__main__":
    unittest.main()
