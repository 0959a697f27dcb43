"""
User profile, onboarding and preference schemas.
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Optional

from pydantic import AfterValidator, Field

from freeeats.models.enums import DietaryTag, FoodType
from freeeats.schemas.campus import CampusResponse
from freeeats.schemas.common import BaseResponseSchema, BaseSchema

__all__ = [
    "PreferenceScore",
    "CuisinePreferences",
    "DietaryTagList",
    "UserProfileSync",
    "UserSummary",
    "UserResponse",
    "CurrentUserResponse",
    "CampusSelection",
    "CuisinePreferencesUpdate",
    "DietaryRestrictionsUpdate",
    "OnboardingRequest",
]

PreferenceScore = Annotated[int, Field(ge=1, le=5)]
CuisinePreferences = Dict[FoodType, PreferenceScore]


def _dedupe_tags(tags: List[DietaryTag]) -> List[DietaryTag]:
    return list(dict.fromkeys(tags))


DietaryTagList = Annotated[List[DietaryTag], AfterValidator(_dedupe_tags)]


class UserProfileSync(BaseSchema):
    """
    Profile fields sent on sign-in. Any field left out falls back to the
    identity token's claims.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    image_url: Optional[str] = Field(default=None, max_length=1024)


class UserSummary(BaseSchema):
    """Public creator/reviewer card."""

    name: str
    image_url: Optional[str] = None


class UserResponse(BaseResponseSchema):
    clerk_id: str
    name: str
    email: Optional[str] = None
    image_url: Optional[str] = None
    campus_id: Optional[str] = None
    cuisine_preferences: Optional[Dict[str, int]] = None
    dietary_restrictions: Optional[List[str]] = None
    has_completed_onboarding: Optional[bool] = None


class CurrentUserResponse(UserResponse):
    campus: Optional[CampusResponse] = None


class CampusSelection(BaseSchema):
    campus_id: str


class CuisinePreferencesUpdate(BaseSchema):
    preferences: CuisinePreferences


class DietaryRestrictionsUpdate(BaseSchema):
    dietary_restrictions: DietaryTagList = Field(default_factory=list)


class OnboardingRequest(BaseSchema):
    campus_id: str
    preferences: CuisinePreferences
    dietary_restrictions: Optional[DietaryTagList] = None
