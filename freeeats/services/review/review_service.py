"""
Star reviews of food posts.

One review per (post, user); submitting again replaces the earlier one.
Creators cannot review their own posts.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from freeeats.core.exceptions import AuthorizationError, ValidationError
from freeeats.models.review import Review
from freeeats.models.user import User
from freeeats.repositories.food import FoodPostRepository
from freeeats.repositories.review import ReviewRepository
from freeeats.repositories.user import UserRepository
from freeeats.schemas.review import (
    ReviewCreate,
    ReviewDetail,
    ReviewResponse,
    ReviewStats,
    ReviewUpsertResult,
)
from freeeats.schemas.storage import UploadUrlResponse
from freeeats.schemas.user import UserSummary
from freeeats.services.base import BaseService
from freeeats.services.storage import StorageService

MIN_RATING = 1
MAX_RATING = 5
UNKNOWN_REVIEWER = UserSummary(name="Unknown", image_url=None)


def average_rating(total: int, count: int) -> float:
    """Mean rating rounded to one decimal; 0 without reviews."""
    if count == 0:
        return 0
    return round(total / count, 1)


class ReviewService(BaseService):

    def __init__(self, db_session: Session, storage: StorageService):
        super().__init__(db_session)
        self.repository = ReviewRepository(db_session)
        self.post_repository = FoodPostRepository(db_session)
        self.user_repository = UserRepository(db_session)
        self.storage = storage

    def add_review(self, user: User, payload: ReviewCreate) -> ReviewUpsertResult:
        """
        Create or replace the caller's review.

        Raises:
            ValidationError: Rating outside 1..5, or reviewing one's own post
            ResourceNotFoundError: Unknown post
        """
        if not MIN_RATING <= payload.rating <= MAX_RATING:
            raise ValidationError(
                "Rating must be between 1 and 5",
                field_errors={"rating": ["Must be between 1 and 5"]},
            )

        with self.transaction():
            post = self.post_repository.get_by_id(payload.food_post_id)
            if post.created_by == user.id:
                raise ValidationError("You cannot review your own food post")
            if payload.image_id:
                self.storage.require_uploaded(payload.image_id)

            existing = self.repository.find_by_post_and_user(post.id, user.id)
            if existing is not None:
                if existing.image_id and existing.image_id != payload.image_id:
                    self.storage.delete(existing.image_id)
                self.repository.update(existing, {
                    "rating": payload.rating,
                    "comment": payload.comment,
                    "image_id": payload.image_id,
                })
                return ReviewUpsertResult(action="updated", review_id=existing.id)

            review = self.repository.create(Review(
                food_post_id=post.id,
                user_id=user.id,
                rating=payload.rating,
                comment=payload.comment,
                image_id=payload.image_id,
            ))
            return ReviewUpsertResult(action="created", review_id=review.id)

    def delete_review(self, user: User, review_id: str) -> None:
        with self.transaction():
            review = self.repository.get_by_id(review_id)
            if review.user_id != user.id:
                raise AuthorizationError(
                    "You can only delete your own reviews", action="delete", resource="review"
                )
            self.storage.delete(review.image_id)
            self.repository.delete(review)

    def list_for_post(self, food_post_id: str) -> List[ReviewDetail]:
        reviews = self.repository.list_by_food_post(food_post_id)
        users = self.user_repository.get_map(r.user_id for r in reviews)
        image_urls = self.storage.get_urls(r.image_id for r in reviews)

        results = []
        for review in reviews:
            reviewer = users.get(review.user_id)
            results.append(ReviewDetail(
                **ReviewResponse.model_validate(review).model_dump(),
                user=UserSummary.model_validate(reviewer) if reviewer else UNKNOWN_REVIEWER,
                image_url=image_urls.get(review.image_id) if review.image_id else None,
            ))
        return results

    def get_stats(self, food_post_id: str) -> ReviewStats:
        total, count = self.repository.rating_totals([food_post_id]).get(food_post_id, (0, 0))
        return ReviewStats(average_rating=average_rating(total, count), review_count=count)

    def get_user_review(self, user: Optional[User], food_post_id: str) -> Optional[ReviewResponse]:
        if user is None:
            return None
        review = self.repository.find_by_post_and_user(food_post_id, user.id)
        return ReviewResponse.model_validate(review) if review else None

    def generate_upload_url(self, user: User) -> UploadUrlResponse:
        return self.storage.generate_upload_url(uploaded_by=user.id)
