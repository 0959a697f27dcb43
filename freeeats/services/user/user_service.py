"""
User profiles, campus selection, onboarding and preferences.

Users are created lazily from identity-provider claims the first time a
client syncs its session.
"""

from typing import Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from freeeats.core.exceptions import ValidationError
from freeeats.core.security import Identity
from freeeats.models.enums import DietaryTag, FoodType
from freeeats.models.user import User
from freeeats.repositories.campus import CampusRepository
from freeeats.repositories.user import UserRepository
from freeeats.schemas.campus import CampusResponse
from freeeats.schemas.user import CurrentUserResponse, UserProfileSync, UserResponse
from freeeats.services.base import BaseService

MIN_PREFERENCE = 1
MAX_PREFERENCE = 5


def normalize_preferences(preferences: Mapping) -> Dict[str, int]:
    """
    Validate a food type to score mapping and key it by enum value.

    Raises:
        ValidationError: Unknown food type or score outside 1..5
    """
    errors: Dict[str, List[str]] = {}
    result: Dict[str, int] = {}
    for key, score in preferences.items():
        try:
            food_type = FoodType(key)
        except ValueError:
            errors[str(key)] = ["Unknown food type"]
            continue
        if isinstance(score, bool) or not isinstance(score, int) or not MIN_PREFERENCE <= score <= MAX_PREFERENCE:
            errors[food_type.value] = [f"Score must be between {MIN_PREFERENCE} and {MAX_PREFERENCE}"]
            continue
        result[food_type.value] = score
    if errors:
        raise ValidationError("Invalid cuisine preferences", field_errors=errors)
    return result


def normalize_tags(tags) -> List[str]:
    """Dedupe dietary tags preserving order, as enum values."""
    try:
        values = [DietaryTag(t).value for t in tags]
    except ValueError as e:
        raise ValidationError("Invalid dietary tag", field_errors={"dietaryTags": [str(e)]}) from e
    return list(dict.fromkeys(values))


class UserService(BaseService):

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.repository = UserRepository(db_session)
        self.campus_repository = CampusRepository(db_session)

    # ------------------------------------------------------------------ #
    # Identity
    # ------------------------------------------------------------------ #
    def find_by_identity(self, identity: Optional[Identity]) -> Optional[User]:
        if identity is None:
            return None
        return self.repository.find_by_clerk_id(identity.subject)

    def get_or_create(self, identity: Identity, profile: Optional[UserProfileSync] = None) -> UserResponse:
        """
        Return the caller's user, creating it on first sign-in. Profile
        fields that changed since the last sync are updated.
        """
        profile = profile or UserProfileSync()
        name = profile.name or identity.name or (identity.email or "").split("@")[0] or "Anonymous"
        email = profile.email if profile.email is not None else identity.email
        image_url = profile.image_url if profile.image_url is not None else identity.image_url

        with self.transaction():
            user = self.repository.find_by_clerk_id(identity.subject)
            if user is None:
                user = self.repository.create(User(
                    clerk_id=identity.subject,
                    name=name,
                    email=email,
                    image_url=image_url,
                ))
                self._logger.info(f"Created user {user.id} for subject {identity.subject}")
            elif (user.name, user.email, user.image_url) != (name, email, image_url):
                self.repository.update(user, {"name": name, "email": email, "image_url": image_url})
            return UserResponse.model_validate(user)

    def get_current(self, user: Optional[User]) -> Optional[CurrentUserResponse]:
        if user is None:
            return None
        response = CurrentUserResponse.model_validate(user)
        if user.campus_id:
            campus = self.campus_repository.find_by_id(user.campus_id)
            if campus is not None:
                response.campus = CampusResponse.model_validate(campus)
        return response

    def get_by_id(self, user_id: str) -> UserResponse:
        return UserResponse.model_validate(self.repository.get_by_id(user_id))

    # ------------------------------------------------------------------ #
    # Campus and preferences
    # ------------------------------------------------------------------ #
    def set_campus(self, user: User, campus_id: str) -> None:
        with self.transaction():
            self.campus_repository.get_by_id(campus_id)
            self.repository.update(user, {"campus_id": campus_id})

    def set_cuisine_preferences(self, user: User, preferences: Mapping) -> Dict[str, int]:
        normalized = normalize_preferences(preferences)
        with self.transaction():
            self.repository.update(user, {"cuisine_preferences": normalized})
        return normalized

    def get_cuisine_preferences(self, user: Optional[User]) -> Optional[Dict[str, int]]:
        if user is None:
            return None
        return user.cuisine_preferences

    def set_dietary_restrictions(self, user: User, restrictions) -> List[str]:
        normalized = normalize_tags(restrictions)
        with self.transaction():
            self.repository.update(user, {"dietary_restrictions": normalized})
        return normalized

    def get_dietary_restrictions(self, user: Optional[User]) -> List[str]:
        if user is None:
            return []
        return list(user.dietary_restrictions or [])

    def complete_onboarding(
        self,
        user: User,
        campus_id: str,
        preferences: Mapping,
        dietary_restrictions=None,
    ) -> CurrentUserResponse:
        changes = {
            "campus_id": campus_id,
            "cuisine_preferences": normalize_preferences(preferences),
            "has_completed_onboarding": True,
        }
        if dietary_restrictions is not None:
            changes["dietary_restrictions"] = normalize_tags(dietary_restrictions)

        with self.transaction():
            self.campus_repository.get_by_id(campus_id)
            self.repository.update(user, changes)
        self._logger.info(f"User {user.id} completed onboarding")
        return self.get_current(user)
