from typing import Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from freeeats.api import deps
from freeeats.core.security import Identity
from freeeats.models.user import User
from freeeats.schemas.common import SuccessResponse
from freeeats.schemas.user import (
    CampusSelection,
    CuisinePreferencesUpdate,
    CurrentUserResponse,
    DietaryRestrictionsUpdate,
    OnboardingRequest,
    UserProfileSync,
    UserResponse,
)
from freeeats.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/me", response_model=UserResponse)
def sync_current_user(
    profile: Optional[UserProfileSync] = Body(None),
    identity: Identity = Depends(deps.get_identity),
    service: UserService = Depends(deps.get_user_service),
):
    """Create the caller's profile on first sign-in, or refresh it."""
    return service.get_or_create(identity, profile)


@router.get("/me", response_model=Optional[CurrentUserResponse])
def read_current_user(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.get_current(user)


@router.put("/me/campus", response_model=SuccessResponse)
def set_campus(
    body: CampusSelection,
    user: User = Depends(deps.get_current_user),
    service: UserService = Depends(deps.get_user_service),
):
    service.set_campus(user, body.campus_id)
    return SuccessResponse()


@router.get("/me/preferences", response_model=Optional[Dict[str, int]])
def get_preferences(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.get_cuisine_preferences(user)


@router.put("/me/preferences", response_model=Dict[str, int])
def set_preferences(
    body: CuisinePreferencesUpdate,
    user: User = Depends(deps.get_current_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.set_cuisine_preferences(user, body.preferences)


@router.get("/me/dietary-restrictions", response_model=List[str])
def get_dietary_restrictions(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.get_dietary_restrictions(user)


@router.put("/me/dietary-restrictions", response_model=List[str])
def set_dietary_restrictions(
    body: DietaryRestrictionsUpdate,
    user: User = Depends(deps.get_current_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.set_dietary_restrictions(user, body.dietary_restrictions)


@router.post("/me/onboarding", response_model=CurrentUserResponse)
def complete_onboarding(
    body: OnboardingRequest,
    user: User = Depends(deps.get_current_user),
    service: UserService = Depends(deps.get_user_service),
):
    return service.complete_onboarding(
        user, body.campus_id, body.preferences, body.dietary_restrictions
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, service: UserService = Depends(deps.get_user_service)):
    return service.get_by_id(user_id)
