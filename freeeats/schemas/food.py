"""
Food post request and response schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from freeeats.models.enums import DietaryTag, FoodType
from freeeats.schemas.common import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from freeeats.schemas.user import DietaryTagList, UserSummary

__all__ = [
    "MAX_DURATION_MINUTES",
    "FoodPostCreate",
    "FoodPostUpdate",
    "FoodPostResponse",
    "FoodPostDetail",
    "FeedEntry",
    "ReportResult",
]

MAX_DURATION_MINUTES = 24 * 60


class FoodPostCreate(BaseCreateSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    food_type: FoodType
    campus_id: str
    location_name: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    duration_minutes: int = Field(..., ge=1, le=MAX_DURATION_MINUTES)
    image_id: Optional[str] = None
    dietary_tags: Optional[DietaryTagList] = None


class FoodPostUpdate(BaseUpdateSchema):
    """Partial patch of a post; extend_minutes pushes the expiry out."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    food_type: Optional[FoodType] = None
    location_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    dietary_tags: Optional[DietaryTagList] = None
    image_id: Optional[str] = None
    extend_minutes: Optional[int] = Field(default=None, ge=1, le=MAX_DURATION_MINUTES)


class FoodPostResponse(BaseResponseSchema):
    title: str
    description: Optional[str] = None
    food_type: FoodType
    campus_id: str
    location_name: str
    latitude: float
    longitude: float
    expires_at: int
    image_id: Optional[str] = None
    created_by: str
    is_active: bool
    dietary_tags: Optional[List[DietaryTag]] = None
    marked_gone_by: Optional[str] = None
    gone_reports: Optional[int] = None
    reported_by: Optional[List[str]] = None


class FoodPostDetail(FoodPostResponse):
    """A post enriched for display."""

    creator: Optional[UserSummary] = None
    image_url: Optional[str] = None
    time_remaining: int = Field(0, description="Milliseconds until expiry, negative once expired")
    is_expired: bool = False
    gone_reports: int = 0
    reported_by: List[str] = Field(default_factory=list)


class FeedEntry(FoodPostDetail):
    average_rating: Optional[float] = Field(None, description="Mean rating, absent without reviews")
    review_count: int = 0
    is_favorite: bool = False
    matches_diet: bool = False
    distance_meters: Optional[float] = None


class ReportResult(BaseSchema):
    reported: bool
    report_count: int
