"""
Review schemas.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from freeeats.schemas.common import BaseCreateSchema, BaseResponseSchema, BaseSchema
from freeeats.schemas.user import UserSummary

__all__ = [
    "ReviewCreate",
    "ReviewResponse",
    "ReviewDetail",
    "ReviewStats",
    "ReviewUpsertResult",
]


class ReviewCreate(BaseCreateSchema):
    """
    Create or replace the caller's review of a post.

    The 1-5 rating range is enforced by the review service so that direct
    callers and HTTP clients get the same error.
    """

    food_post_id: str
    rating: int
    comment: Optional[str] = Field(default=None, max_length=2000)
    image_id: Optional[str] = None


class ReviewResponse(BaseResponseSchema):
    food_post_id: str
    user_id: str
    rating: int
    comment: Optional[str] = None
    image_id: Optional[str] = None


class ReviewDetail(ReviewResponse):
    user: UserSummary
    image_url: Optional[str] = None


class ReviewStats(BaseSchema):
    average_rating: float = 0
    review_count: int = 0


class ReviewUpsertResult(BaseSchema):
    action: Literal["created", "updated"]
    review_id: str
