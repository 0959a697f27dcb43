import unittest

from freeeats.core.exceptions import ResourceNotFoundError, ValidationError
from freeeats.core.security import Identity
from freeeats.models import User
from freeeats.schemas.user import UserProfileSync
from freeeats.services.user import UserService
from freeeats.services.user.user_service import normalize_preferences, normalize_tags
from tests.helpers import DatabaseTestCase


class TestNormalization(unittest.TestCase):

    def test_preferences_keyed_by_value(self):
        self.assertEqual(normalize_preferences({"pizza": 5, "asian": 1}), {"pizza": 5, "asian": 1})

    def test_unknown_food_type(self):
        with self.assertRaises(ValidationError) as ctx:
            normalize_preferences({"sushi": 4})
        self.assertIn("sushi", ctx.exception.details["field_errors"])

    def test_score_out_of_range(self):
        for score in (0, 6, True, "5"):
            with self.assertRaises(ValidationError):
                normalize_preferences({"pizza": score})

    def test_tags_are_deduplicated(self):
        self.assertEqual(normalize_tags(["vegan", "halal", "vegan"]), ["vegan", "halal"])

    def test_unknown_tag(self):
        with self.assertRaises(ValidationError):
            normalize_tags(["paleo"])


class TestUserService(DatabaseTestCase):

    def setUp(self):
        super().setUp()
        self.service = UserService(self.db)
        self.campus = self.make_campus()

    def test_first_sync_creates_user(self):
        identity = Identity(subject="user_1", name="Alex Doe", email="alex@example.edu")
        user = self.service.get_or_create(identity)

        self.assertEqual(user.clerk_id, "user_1")
        self.assertEqual(user.name, "Alex Doe")
        self.assertEqual(user.email, "alex@example.edu")
        self.assertIsNone(user.has_completed_onboarding)

    def test_sync_is_idempotent_and_refreshes_profile(self):
        identity = Identity(subject="user_1", name="Alex")
        first = self.service.get_or_create(identity)
        second = self.service.get_or_create(identity, UserProfileSync(name="Alexandra", image_url="http://img"))

        self.assertEqual(first.id, second.id)
        self.assertEqual(second.name, "Alexandra")
        self.assertEqual(second.image_url, "http://img")
        self.assertEqual(self.db.query(User).count(), 1)

    def test_name_falls_back_to_email_then_anonymous(self):
        from_email = self.service.get_or_create(Identity(subject="a", email="sam@example.edu"))
        self.assertEqual(from_email.name, "sam")

        anonymous = self.service.get_or_create(Identity(subject="b"))
        self.assertEqual(anonymous.name, "Anonymous")

    def test_find_by_identity(self):
        self.make_user("user_1")
        self.assertIsNotNone(self.service.find_by_identity(Identity(subject="user_1")))
        self.assertIsNone(self.service.find_by_identity(Identity(subject="user_2")))
        self.assertIsNone(self.service.find_by_identity(None))

    def test_set_campus(self):
        user = self.make_user()
        self.service.set_campus(user, self.campus.id)

        current = self.service.get_current(user)
        self.assertEqual(current.campus_id, self.campus.id)
        self.assertEqual(current.campus.name, "Test University")

    def test_set_unknown_campus(self):
        user = self.make_user()
        with self.assertRaises(ResourceNotFoundError):
            self.service.set_campus(user, "missing")
        self.db.refresh(user)
        self.assertIsNone(user.campus_id)

    def test_current_user_without_campus(self):
        current = self.service.get_current(self.make_user())
        self.assertIsNone(current.campus)
        self.assertIsNone(self.service.get_current(None))

    def test_preferences_roundtrip(self):
        user = self.make_user()
        self.assertIsNone(self.service.get_cuisine_preferences(user))

        self.service.set_cuisine_preferences(user, {"pizza": 5, "drinks": 2})
        self.db.refresh(user)
        self.assertEqual(self.service.get_cuisine_preferences(user), {"pizza": 5, "drinks": 2})
        self.assertIsNone(self.service.get_cuisine_preferences(None))

    def test_invalid_preferences_are_not_stored(self):
        user = self.make_user()
        with self.assertRaises(ValidationError):
            self.service.set_cuisine_preferences(user, {"pizza": 9})
        self.db.refresh(user)
        self.assertIsNone(user.cuisine_preferences)

    def test_dietary_restrictions(self):
        user = self.make_user()
        self.assertEqual(self.service.get_dietary_restrictions(user), [])

        self.service.set_dietary_restrictions(user, ["gluten-free", "vegan"])
        self.db.refresh(user)
        self.assertEqual(self.service.get_dietary_restrictions(user), ["gluten-free", "vegan"])
        self.assertEqual(self.service.get_dietary_restrictions(None), [])

    def test_complete_onboarding(self):
        user = self.make_user()
        current = self.service.complete_onboarding(
            user, self.campus.id, {"mexican": 4}, dietary_restrictions=["halal"]
        )

        self.assertTrue(current.has_completed_onboarding)
        self.assertEqual(current.campus.id, self.campus.id)
        self.assertEqual(current.cuisine_preferences, {"mexican": 4})
        self.assertEqual(current.dietary_restrictions, ["halal"])

    def test_onboarding_keeps_restrictions_when_omitted(self):
        user = self.make_user(dietary_restrictions=["kosher"])
        current = self.service.complete_onboarding(user, self.campus.id, {"pizza": 3})
        self.assertEqual(current.dietary_restrictions, ["kosher"])

    def test_get_unknown_user(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.get_by_id("missing")


if __name__ == "__main__":
    unittest.main()
