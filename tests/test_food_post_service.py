import unittest
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from freeeats.core.exceptions import (
    AuthorizationError,
    ModerationRejectedError,
    ResourceNotFoundError,
    ValidationError,
)
from freeeats.models import FoodPost, FoodType, Notification, Review, StoredFile
from freeeats.schemas.food import FoodPostCreate, FoodPostUpdate
from freeeats.services.food import FoodPostService
from freeeats.services.moderation import ModerationImage, ModerationResult
from freeeats.utils.datetime_utils import now_ms
from tests.helpers import PNG_BYTES, DatabaseTestCase, accepting_moderator


class FoodPostServiceTestCase(DatabaseTestCase):

    def setUp(self):
        super().setUp()
        self.moderator = accepting_moderator()
        self.service = FoodPostService(self.db, self.storage, self.moderator)
        self.campus = self.make_campus()
        self.bob = self.make_user("user_bob", "Bob")
        self.alice = self.make_user("user_alice", "Alice")
        self.carol = self.make_user("user_carol", "Carol")

    def _payload(self, **overrides):
        values = dict(
            title="Leftover bagels",
            description="Plain and everything",
            food_type=FoodType.SNACKS,
            campus_id=self.campus.id,
            location_name="Library lobby",
            latitude=40.0,
            longitude=-88.0,
            duration_minutes=60,
        )
        values.update(overrides)
        return FoodPostCreate(**values)

    def _reload(self, post_id):
        self.db.expire_all()
        return self.db.get(FoodPost, post_id)


class TestCreatePost(FoodPostServiceTestCase):

    def test_expiry_is_duration_after_now(self):
        before = now_ms()
        post = self.service.create(self.bob, self._payload(duration_minutes=60))
        after = now_ms()

        self.assertGreaterEqual(post.expires_at, before + 3_600_000)
        self.assertLessEqual(post.expires_at, after + 3_600_000)
        self.assertTrue(post.is_active)
        self.assertEqual(post.created_by, self.bob.id)
        self.assertEqual(post.gone_reports, 0)
        self.assertEqual(post.reported_by, [])

    def test_moderation_sees_title_and_description(self):
        self.service.create(self.bob, self._payload())
        self.moderator.moderate.assert_called_once_with("Leftover bagels", "Plain and everything", None)

    def test_rejected_post_is_not_written(self):
        self.moderator.moderate.return_value = ModerationResult(is_valid=False, reason="Not food")

        with self.assertRaises(ModerationRejectedError) as ctx:
            self.service.create(self.bob, self._payload(title="Selling my bike"))
        self.assertEqual(ctx.exception.reason, "Not food")
        self.assertEqual(self.db.query(FoodPost).count(), 0)

    def test_image_is_passed_to_moderation(self):
        image_id = self.upload_image(self.bob)
        post = self.service.create(self.bob, self._payload(image_id=image_id))

        self.assertEqual(post.image_id, image_id)
        image = self.moderator.moderate.call_args.args[2]
        self.assertEqual(image, ModerationImage(data=PNG_BYTES, mime_type="image/png"))

    def test_image_must_be_uploaded(self):
        pending = self.storage.generate_upload_url(uploaded_by=self.bob.id)
        with self.assertRaises(ValidationError):
            self.service.create(self.bob, self._payload(image_id=pending.storage_id))
        self.moderator.moderate.assert_not_called()

    def test_unknown_campus(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.create(self.bob, self._payload(campus_id="missing"))

    def test_dietary_tags_are_stored_as_values(self):
        post = self.service.create(self.bob, self._payload(dietary_tags=["vegan", "halal", "vegan"]))
        self.assertEqual(self._reload(post.id).dietary_tags, ["vegan", "halal"])


class TestReadPosts(FoodPostServiceTestCase):

    def test_expired_and_gone_posts_are_hidden(self):
        active = self.make_post(self.bob, self.campus, "Active")
        expired = self.make_post(self.bob, self.campus, "Expired", minutes_left=-5)
        self.make_post(self.bob, self.campus, "Gone", is_active=False)

        self.assertEqual([p.id for p in self.service.list_by_campus(self.campus.id)], [active.id])

        with_expired = {p.id: p for p in self.service.list_by_campus(self.campus.id, include_expired=True)}
        self.assertEqual(set(with_expired), {active.id, expired.id})
        self.assertTrue(with_expired[expired.id].is_expired)
        self.assertLess(with_expired[expired.id].time_remaining, 0)
        self.assertFalse(with_expired[active.id].is_expired)
        self.assertGreater(with_expired[active.id].time_remaining, 0)

    def test_other_campus_posts_are_not_listed(self):
        other = self.make_campus("Other College")
        self.make_post(self.bob, other)
        self.assertEqual(self.service.list_by_campus(self.campus.id), [])

    def test_newest_first(self):
        old = self.make_post(self.bob, self.campus, "Old", creation_time=1000)
        new = self.make_post(self.bob, self.campus, "New", creation_time=2000)
        self.assertEqual([p.id for p in self.service.list_by_campus(self.campus.id)], [new.id, old.id])

    def test_get_post_includes_creator_and_image(self):
        image_id = self.upload_image(self.bob)
        post = self.make_post(self.bob, self.campus, image_id=image_id)

        detail = self.service.get_post(post.id)
        self.assertEqual(detail.creator.name, "Bob")
        self.assertEqual(detail.image_url, f"http://testserver/api/v1/storage/{image_id}")

    def test_get_missing_post(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.get_post("missing")

    def test_my_posts_include_inactive(self):
        self.make_post(self.bob, self.campus, "Active")
        self.make_post(self.bob, self.campus, "Gone", is_active=False)
        self.make_post(self.alice, self.campus, "Not mine")

        self.assertEqual({p.title for p in self.service.list_my_posts(self.bob)}, {"Active", "Gone"})
        self.assertEqual(self.service.list_my_posts(None), [])


class TestFeed(FoodPostServiceTestCase):

    def test_food_type_filter(self):
        self.make_post(self.bob, self.campus, "Pizza", food_type=FoodType.PIZZA)
        self.make_post(self.bob, self.campus, "Tacos", food_type=FoodType.MEXICAN)

        entries = self.service.feed(self.campus.id, food_type=FoodType.MEXICAN)
        self.assertEqual([e.title for e in entries], ["Tacos"])

    def test_distance_filter(self):
        self.make_post(self.bob, self.campus, "Here")
        self.make_post(self.bob, self.campus, "Far away", latitude=41.0)

        entries = self.service.feed(self.campus.id, latitude=40.0, longitude=-88.0)
        self.assertEqual([e.title for e in entries], ["Here"])
        self.assertEqual(entries[0].distance_meters, 0.0)

        everything = self.service.feed(self.campus.id)
        self.assertEqual(len(everything), 2)
        self.assertIsNone(everything[0].distance_meters)

    def test_location_needs_both_coordinates(self):
        with self.assertRaises(ValidationError):
            self.service.feed(self.campus.id, latitude=40.0)

    def test_diet_and_favorite_flags(self):
        self.alice.dietary_restrictions = ["vegan"]
        self.alice.cuisine_preferences = {"pizza": 5}
        self.db.commit()
        self.make_post(self.bob, self.campus, "Vegan pizza", dietary_tags=["vegan", "halal"])
        self.make_post(self.bob, self.campus, "Meat snacks", food_type=FoodType.SNACKS)

        entries = {e.title: e for e in self.service.feed(self.campus.id, viewer=self.alice)}
        self.assertTrue(entries["Vegan pizza"].matches_diet)
        self.assertTrue(entries["Vegan pizza"].is_favorite)
        self.assertFalse(entries["Meat snacks"].matches_diet)
        self.assertFalse(entries["Meat snacks"].is_favorite)

    def test_no_restrictions_never_matches_diet(self):
        self.make_post(self.bob, self.campus, dietary_tags=["vegan"])
        entry = self.service.feed(self.campus.id, viewer=self.alice)[0]
        self.assertFalse(entry.matches_diet)

    def test_ratings_drive_order(self):
        poor = self.make_post(self.bob, self.campus, "Poor", creation_time=2000)
        good = self.make_post(self.bob, self.campus, "Good", creation_time=1000)
        self.db.add_all([
            Review(food_post_id=poor.id, user_id=self.alice.id, rating=1),
            Review(food_post_id=good.id, user_id=self.alice.id, rating=5),
            Review(food_post_id=good.id, user_id=self.carol.id, rating=4),
        ])
        self.db.commit()

        entries = self.service.feed(self.campus.id)
        self.assertEqual([e.title for e in entries], ["Good", "Poor"])
        self.assertEqual(entries[0].average_rating, 4.5)
        self.assertEqual(entries[0].review_count, 2)

    def test_unrated_post_has_no_average(self):
        self.make_post(self.bob, self.campus)
        entry = self.service.feed(self.campus.id)[0]
        self.assertIsNone(entry.average_rating)
        self.assertEqual(entry.review_count, 0)


class TestCreatorOperations(FoodPostServiceTestCase):

    def test_creator_marks_gone(self):
        post = self.make_post(self.bob, self.campus)
        self.service.mark_gone(self.bob, post.id)

        stored = self._reload(post.id)
        self.assertFalse(stored.is_active)
        self.assertEqual(stored.marked_gone_by, self.bob.id)
        self.assertEqual(self.service.list_by_campus(self.campus.id), [])

    def test_only_creator_marks_gone(self):
        post = self.make_post(self.bob, self.campus)
        with self.assertRaises(AuthorizationError):
            self.service.mark_gone(self.alice, post.id)
        self.assertTrue(self._reload(post.id).is_active)

    def test_partial_update(self):
        post = self.make_post(self.bob, self.campus, "Pizza", description="Cheese")
        result = self.service.update(self.bob, post.id, FoodPostUpdate(title="Veggie pizza"))

        self.assertEqual(result.title, "Veggie pizza")
        self.assertEqual(result.description, "Cheese")

    def test_explicit_null_clears_optional_field(self):
        post = self.make_post(self.bob, self.campus, description="Cheese")
        self.service.update(self.bob, post.id, FoodPostUpdate(description=None))
        self.assertIsNone(self._reload(post.id).description)

    def test_required_fields_cannot_be_cleared(self):
        post = self.make_post(self.bob, self.campus)
        with self.assertRaises(ValidationError):
            self.service.update(self.bob, post.id, FoodPostUpdate(title=None))

    def test_only_creator_updates(self):
        post = self.make_post(self.bob, self.campus, "Pizza")
        with self.assertRaises(AuthorizationError):
            self.service.update(self.alice, post.id, FoodPostUpdate(title="Mine now"))
        self.assertEqual(self._reload(post.id).title, "Pizza")

    def test_extend_from_current_expiry(self):
        post = self.make_post(self.bob, self.campus, minutes_left=10)
        original = post.expires_at
        result = self.service.update(self.bob, post.id, FoodPostUpdate(extend_minutes=30))
        self.assertEqual(result.expires_at, original + 30 * 60000)

    def test_extend_expired_post_from_now(self):
        post = self.make_post(self.bob, self.campus, minutes_left=-60)
        before = now_ms()
        result = self.service.update(self.bob, post.id, FoodPostUpdate(extend_minutes=30))
        self.assertGreaterEqual(result.expires_at, before + 30 * 60000)

    def test_replacing_image_deletes_old_one(self):
        old_image = self.upload_image(self.bob)
        new_image = self.upload_image(self.bob)
        post = self.make_post(self.bob, self.campus, image_id=old_image)

        self.service.update(self.bob, post.id, FoodPostUpdate(image_id=new_image))

        self.assertEqual(self._reload(post.id).image_id, new_image)
        self.assertIsNone(self.db.get(StoredFile, old_image))
        self.assertIsNotNone(self.storage.read_optional(new_image))
        self.assertEqual(len(self.blob_store.blobs), 1)

    def test_failed_commit_keeps_old_image(self):
        old_image = self.upload_image(self.bob)
        new_image = self.upload_image(self.bob)
        post = self.make_post(self.bob, self.campus, image_id=old_image)

        with patch.object(self.db, "commit", side_effect=SQLAlchemyError("disk full")):
            with self.assertRaises(SQLAlchemyError):
                self.service.update(self.bob, post.id, FoodPostUpdate(image_id=new_image))

        self.assertEqual(self._reload(post.id).image_id, old_image)
        self.assertEqual(self.storage.read(old_image), (PNG_BYTES, "image/png"))
        self.assertEqual(len(self.blob_store.blobs), 2)


class TestGoneReports(FoodPostServiceTestCase):

    def setUp(self):
        super().setUp()
        self.post = self.make_post(self.bob, self.campus, "Pizza")
        self.post_id = self.post.id

    def _notification(self):
        self.db.expire_all()
        return self.db.query(Notification).filter_by(food_post_id=self.post_id).one_or_none()

    def _assert_counts_consistent(self):
        post = self._reload(self.post_id)
        self.assertEqual(post.gone_reports, len(post.reported_by))
        self.assertEqual(len(set(post.reported_by)), len(post.reported_by))

    def test_first_report_notifies_creator(self):
        result = self.service.report_gone(self.alice, self.post_id)

        self.assertTrue(result.reported)
        self.assertEqual(result.report_count, 1)
        self.assertEqual(self._reload(self.post_id).reported_by, [self.alice.id])
        notification = self._notification()
        self.assertEqual(notification.user_id, self.bob.id)
        self.assertEqual(notification.report_count, 1)
        self.assertEqual(notification.food_title, "Pizza")
        self.assertFalse(notification.is_read)
        self._assert_counts_consistent()

    def test_report_toggles(self):
        self.service.report_gone(self.alice, self.post_id)
        self.service.report_gone(self.carol, self.post_id)
        self.assertEqual(self._notification().report_count, 2)

        result = self.service.report_gone(self.alice, self.post_id)
        self.assertFalse(result.reported)
        self.assertEqual(result.report_count, 1)
        self.assertEqual(self._reload(self.post_id).reported_by, [self.carol.id])
        self.assertEqual(self._notification().report_count, 1)
        self._assert_counts_consistent()

    def test_last_withdrawal_removes_notification(self):
        self.service.report_gone(self.alice, self.post_id)
        result = self.service.unreport_gone(self.alice, self.post_id)

        self.assertEqual(result.report_count, 0)
        self.assertIsNone(self._notification())
        self._assert_counts_consistent()

    def test_new_report_marks_notification_unread(self):
        self.service.report_gone(self.alice, self.post_id)
        notification = self._notification()
        notification.is_read = True
        self.db.commit()

        self.service.report_gone(self.carol, self.post_id)
        self.assertFalse(self._notification().is_read)
        self.assertEqual(self.db.query(Notification).count(), 1)

    def test_unreport_without_report(self):
        with self.assertRaises(ValidationError):
            self.service.unreport_gone(self.alice, self.post_id)

    def test_creator_cannot_report(self):
        with self.assertRaises(AuthorizationError):
            self.service.report_gone(self.bob, self.post_id)
        self.assertEqual(self._reload(self.post_id).gone_reports, 0)
        self.assertIsNone(self._notification())

    def test_report_missing_post(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.report_gone(self.alice, "missing")


if __name__ == "__main__":
    unittest.main()
