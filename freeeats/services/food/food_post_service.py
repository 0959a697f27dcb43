"""
Food post lifecycle: create, browse, update, mark gone and "gone" reports.

A post is visible while it is active and unexpired. Expiry is never
written; it is derived from expires_at at read time. Only the creator may
change or close a post; everyone else may report it gone, which notifies
the creator.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from freeeats.core.exceptions import AuthorizationError, ValidationError
from freeeats.models.enums import FoodType
from freeeats.models.food_post import FoodPost
from freeeats.models.user import User
from freeeats.repositories.campus import CampusRepository
from freeeats.repositories.food import FoodPostRepository
from freeeats.repositories.review import ReviewRepository
from freeeats.repositories.user import UserRepository
from freeeats.schemas.food import (
    FeedEntry,
    FoodPostCreate,
    FoodPostDetail,
    FoodPostResponse,
    FoodPostUpdate,
    ReportResult,
)
from freeeats.schemas.storage import UploadUrlResponse
from freeeats.schemas.user import UserSummary
from freeeats.services.base import BaseService
from freeeats.services.food.feed_ranking import is_favorite, rank_feed
from freeeats.services.moderation import ContentModerator, ModerationImage
from freeeats.services.notification import NotificationService
from freeeats.services.review.review_service import average_rating
from freeeats.services.storage import StorageService
from freeeats.utils.datetime_utils import expires_at_from_now, extend_expiry, now_ms
from freeeats.utils.geo_utils import GeoPoint, distance_meters, miles_to_meters

FEED_RADIUS_METERS = miles_to_meters(20)

_REQUIRED_FIELDS = ("title", "food_type", "location_name", "latitude", "longitude")


def _enum_values(values) -> Optional[List[str]]:
    if values is None:
        return None
    return [getattr(v, "value", v) for v in values]


class FoodPostService(BaseService):

    def __init__(
        self,
        db_session: Session,
        storage: StorageService,
        moderator: ContentModerator,
        notifications: Optional[NotificationService] = None,
    ):
        super().__init__(db_session)
        self.repository = FoodPostRepository(db_session)
        self.campus_repository = CampusRepository(db_session)
        self.review_repository = ReviewRepository(db_session)
        self.user_repository = UserRepository(db_session)
        self.storage = storage
        self.moderator = moderator
        self.notifications = notifications or NotificationService(db_session)

    # ------------------------------------------------------------------ #
    # Create
    # ------------------------------------------------------------------ #
    def create(self, user: User, payload: FoodPostCreate) -> FoodPostResponse:
        """
        Publish a post after content moderation.

        Raises:
            ModerationRejectedError: The classifier judged the post not food
                related; nothing is written
            ResourceNotFoundError: Unknown campus
            ValidationError: image_id is not an uploaded file
        """
        self.campus_repository.get_by_id(payload.campus_id)
        image = None
        if payload.image_id:
            self.storage.require_uploaded(payload.image_id)
            stored = self.storage.read_optional(payload.image_id)
            if stored is not None:
                image = ModerationImage(data=stored[0], mime_type=stored[1])

        self.moderator.moderate(payload.title, payload.description, image).raise_if_rejected()

        with self.transaction():
            post = self.repository.create(FoodPost(
                title=payload.title,
                description=payload.description,
                food_type=payload.food_type,
                campus_id=payload.campus_id,
                location_name=payload.location_name,
                latitude=payload.latitude,
                longitude=payload.longitude,
                expires_at=expires_at_from_now(payload.duration_minutes),
                image_id=payload.image_id,
                created_by=user.id,
                is_active=True,
                dietary_tags=_enum_values(payload.dietary_tags),
                gone_reports=0,
                reported_by=[],
            ))
            self._logger.info(f"User {user.id} created food post {post.id}")
            return FoodPostResponse.model_validate(post)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def list_by_campus(self, campus_id: str, include_expired: bool = False) -> List[FoodPostDetail]:
        now = now_ms()
        posts = self.repository.list_active_by_campus(campus_id, None if include_expired else now)
        return self._enrich(posts, now)

    def get_post(self, post_id: str) -> FoodPostDetail:
        post = self.repository.get_by_id(post_id)
        return self._enrich([post], now_ms())[0]

    def list_my_posts(self, user: Optional[User]) -> List[FoodPostResponse]:
        if user is None:
            return []
        return [FoodPostResponse.model_validate(p) for p in self.repository.list_by_creator(user.id)]

    def feed(
        self,
        campus_id: str,
        viewer: Optional[User] = None,
        food_type: Optional[FoodType] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> List[FeedEntry]:
        """
        Visible posts of a campus ranked for the viewer.

        With a viewer location, posts further than 20 miles are dropped and
        each entry carries its distance.
        """
        if (latitude is None) != (longitude is None):
            raise ValidationError("Both latitude and longitude are required for a location")
        origin = GeoPoint(latitude, longitude) if latitude is not None else None

        now = now_ms()
        posts = self.repository.list_active_by_campus(campus_id, now)
        if food_type is not None:
            posts = [p for p in posts if p.food_type == food_type]

        preferences = viewer.cuisine_preferences if viewer else None
        restrictions = set(viewer.dietary_restrictions or []) if viewer else set()
        totals = self.review_repository.rating_totals(p.id for p in posts)

        entries = []
        for detail in self._enrich(posts, now):
            total, count = totals.get(detail.id, (0, 0))
            distance = None
            if origin is not None:
                distance = distance_meters(origin, GeoPoint(detail.latitude, detail.longitude))
                if distance > FEED_RADIUS_METERS:
                    continue
            tags = set(_enum_values(detail.dietary_tags) or [])
            entries.append(FeedEntry(
                **detail.model_dump(),
                average_rating=average_rating(total, count) if count else None,
                review_count=count,
                is_favorite=is_favorite(preferences, detail.food_type),
                matches_diet=bool(restrictions) and restrictions <= tags,
                distance_meters=round(distance, 1) if distance is not None else None,
            ))
        return rank_feed(entries, preferences)

    def _enrich(self, posts: List[FoodPost], now: int) -> List[FoodPostDetail]:
        creators = self.user_repository.get_map(p.created_by for p in posts)
        image_urls = self.storage.get_urls(p.image_id for p in posts)
        results = []
        for post in posts:
            creator = creators.get(post.created_by)
            data = FoodPostResponse.model_validate(post).model_dump()
            data["gone_reports"] = post.gone_reports or 0
            data["reported_by"] = list(post.reported_by or [])
            results.append(FoodPostDetail(
                **data,
                creator=UserSummary.model_validate(creator) if creator else None,
                image_url=image_urls.get(post.image_id) if post.image_id else None,
                time_remaining=post.expires_at - now,
                is_expired=now >= post.expires_at,
            ))
        return results

    # ------------------------------------------------------------------ #
    # Creator operations
    # ------------------------------------------------------------------ #
    def _require_creator(self, post: FoodPost, user: User, action: str, message: str) -> None:
        if post.created_by != user.id:
            raise AuthorizationError(message, action=action, resource="food_post")

    def mark_gone(self, user: User, post_id: str) -> None:
        with self.transaction():
            post = self.repository.get_for_update(post_id)
            self._require_creator(post, user, "mark_gone", "Only the creator can delete this food post")
            self.repository.update(post, {"is_active": False, "marked_gone_by": user.id})
        self._logger.info(f"Food post {post_id} marked gone by creator")

    def update(self, user: User, post_id: str, patch: FoodPostUpdate) -> FoodPostResponse:
        """
        Apply a partial update. Replacing or clearing the image deletes the
        previous one; extend_minutes extends from the later of the current
        expiry and now.
        """
        changes = patch.model_dump(exclude_unset=True)
        extend_minutes = changes.pop("extend_minutes", None)

        nulls = [f for f in _REQUIRED_FIELDS if f in changes and changes[f] is None]
        if nulls:
            raise ValidationError(
                "Required fields cannot be cleared",
                field_errors={f: ["May not be null"] for f in nulls},
            )
        if "dietary_tags" in changes:
            changes["dietary_tags"] = _enum_values(changes["dietary_tags"])

        with self.transaction():
            post = self.repository.get_for_update(post_id)
            self._require_creator(post, user, "update", "Only the creator can edit this food post")

            if "image_id" in changes and changes["image_id"] != post.image_id:
                if changes["image_id"]:
                    self.storage.require_uploaded(changes["image_id"])
                if post.image_id:
                    self.storage.delete(post.image_id)
            if extend_minutes:
                changes["expires_at"] = extend_expiry(post.expires_at, extend_minutes)

            self.repository.update(post, changes)
            return FoodPostResponse.model_validate(post)

    def generate_upload_url(self, user: User) -> UploadUrlResponse:
        return self.storage.generate_upload_url(uploaded_by=user.id)

    # ------------------------------------------------------------------ #
    # Gone reports
    # ------------------------------------------------------------------ #
    def report_gone(self, user: User, post_id: str) -> ReportResult:
        """
        Toggle the caller's "food is gone" report.

        The first call adds the report and notifies the creator; calling
        again withdraws it.
        """
        with self.transaction():
            post = self._lock_for_report(user, post_id)
            if user.id in (post.reported_by or []):
                return self._remove_report(post, user)
            return self._add_report(post, user)

    def unreport_gone(self, user: User, post_id: str) -> ReportResult:
        """
        Raises:
            ValidationError: The caller has not reported this post
        """
        with self.transaction():
            post = self._lock_for_report(user, post_id)
            if user.id not in (post.reported_by or []):
                raise ValidationError("You haven't reported this food post")
            return self._remove_report(post, user)

    def _lock_for_report(self, user: User, post_id: str) -> FoodPost:
        post = self.repository.get_for_update(post_id)
        if post.created_by == user.id:
            raise AuthorizationError(
                "As the creator, use the delete option instead",
                action="report_gone",
                resource="food_post",
            )
        return post

    def _add_report(self, post: FoodPost, user: User) -> ReportResult:
        reported_by = list(post.reported_by or []) + [user.id]
        self._set_reports(post, reported_by)
        self.notifications.on_report_added(post, len(reported_by))
        self._logger.info(f"Food post {post.id} reported gone ({len(reported_by)} reports)")
        return ReportResult(reported=True, report_count=len(reported_by))

    def _remove_report(self, post: FoodPost, user: User) -> ReportResult:
        reported_by = [uid for uid in (post.reported_by or []) if uid != user.id]
        self._set_reports(post, reported_by)
        self.notifications.on_report_removed(post, len(reported_by))
        return ReportResult(reported=False, report_count=len(reported_by))

    def _set_reports(self, post: FoodPost, reported_by: List[str]) -> None:
        self.repository.update(post, {"reported_by": reported_by, "gone_reports": len(reported_by)})
