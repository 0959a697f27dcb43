"""
Pydantic schemas forming the JSON wire contract (camelCase on the wire).
"""

from freeeats.schemas.campus import AddressSuggestion, CampusResponse
from freeeats.schemas.common import BaseSchema, SuccessResponse
from freeeats.schemas.food import (
    FeedEntry,
    FoodPostCreate,
    FoodPostDetail,
    FoodPostResponse,
    FoodPostUpdate,
    ReportResult,
)
from freeeats.schemas.notification import NotificationResponse, UnreadCount
from freeeats.schemas.review import (
    ReviewCreate,
    ReviewDetail,
    ReviewResponse,
    ReviewStats,
    ReviewUpsertResult,
)
from freeeats.schemas.storage import StoredFileResponse, UploadUrlResponse
from freeeats.schemas.user import (
    CampusSelection,
    CuisinePreferencesUpdate,
    CurrentUserResponse,
    DietaryRestrictionsUpdate,
    OnboardingRequest,
    UserProfileSync,
    UserResponse,
    UserSummary,
)

__all__ = [
    "AddressSuggestion",
    "BaseSchema",
    "CampusResponse",
    "CampusSelection",
    "CuisinePreferencesUpdate",
    "CurrentUserResponse",
    "DietaryRestrictionsUpdate",
    "FeedEntry",
    "FoodPostCreate",
    "FoodPostDetail",
    "FoodPostResponse",
    "FoodPostUpdate",
    "NotificationResponse",
    "OnboardingRequest",
    "ReportResult",
    "ReviewCreate",
    "ReviewDetail",
    "ReviewResponse",
    "ReviewStats",
    "ReviewUpsertResult",
    "StoredFileResponse",
    "SuccessResponse",
    "UnreadCount",
    "UploadUrlResponse",
    "UserProfileSync",
    "UserResponse",
    "UserSummary",
]
