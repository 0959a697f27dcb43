"""
FastAPI dependencies: database session, caller identity and services.

Example usage in a router:

    @router.get("/me")
    def read_me(user: User = Depends(deps.get_current_user)):
        ...
"""

from functools import lru_cache
from typing import AsyncIterator, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from freeeats.config.settings import get_settings
from freeeats.core.exceptions import AuthenticationError, ResourceNotFoundError
from freeeats.core.logging import get_logger, user_id as user_id_var
from freeeats.core.security import Identity, TokenVerifier
from freeeats.db.session import get_db
from freeeats.models.user import User
from freeeats.services.campus import CampusService
from freeeats.services.food import FoodPostService
from freeeats.services.geocoding import GeocodingService
from freeeats.services.moderation import ContentModerator
from freeeats.services.notification import NotificationService
from freeeats.services.review import ReviewService
from freeeats.services.storage import BlobStore, LocalBlobStore, StorageService
from freeeats.services.user import UserService

logger = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


# --- Shared clients ------------------------------------------------------------

@lru_cache()
def get_token_verifier() -> TokenVerifier:
    return TokenVerifier(get_settings())


@lru_cache()
def get_blob_store() -> BlobStore:
    return LocalBlobStore(get_settings().UPLOAD_DIR)


@lru_cache()
def get_moderator() -> ContentModerator:
    return ContentModerator(get_settings())


@lru_cache()
def get_geocoder() -> GeocodingService:
    return GeocodingService(get_settings())


# --- Authentication ------------------------------------------------------------

async def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> AsyncIterator[Optional[Identity]]:
    """
    Identity from the bearer token, or None when no token was sent.

    The caller id stays in the logging context for the rest of the request.
    Signing-key fetches happen in the threadpool.
    """
    identity = None
    if credentials is not None:
        try:
            identity = await run_in_threadpool(verifier.verify, credentials.credentials)
        except jwt.PyJWTError as e:
            logger.warning(f"Rejected bearer token: {e}")
            raise AuthenticationError("Invalid authentication token") from e

    token = user_id_var.set(identity.subject if identity else None)
    try:
        yield identity
    finally:
        user_id_var.reset(token)


def get_identity(identity: Optional[Identity] = Depends(get_optional_identity)) -> Identity:
    if identity is None:
        raise AuthenticationError()
    return identity


def get_optional_user(
    identity: Optional[Identity] = Depends(get_optional_identity),
    db: Session = Depends(get_db),
) -> Optional[User]:
    return UserService(db).find_by_identity(identity)


def get_current_user(
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> User:
    """The caller's user record; it must have been synced via POST /users/me."""
    user = UserService(db).find_by_identity(identity)
    if user is None:
        raise ResourceNotFoundError("User", message="User not found")
    return user


# --- Services ------------------------------------------------------------------

def get_storage_service(
    db: Session = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
) -> StorageService:
    return StorageService(db, blob_store, get_settings())


def get_campus_service(
    db: Session = Depends(get_db),
    geocoder: GeocodingService = Depends(get_geocoder),
) -> CampusService:
    return CampusService(db, geocoder)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


def get_review_service(
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
) -> ReviewService:
    return ReviewService(db, storage)


def get_food_post_service(
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
    moderator: ContentModerator = Depends(get_moderator),
) -> FoodPostService:
    return FoodPostService(db, storage, moderator, NotificationService(db))


__all__ = [
    "get_db",
    "get_token_verifier",
    "get_blob_store",
    "get_moderator",
    "get_geocoder",
    "get_optional_identity",
    "get_identity",
    "get_optional_user",
    "get_current_user",
    "get_storage_service",
    "get_campus_service",
    "get_user_service",
    "get_notification_service",
    "get_review_service",
    "get_food_post_service",
]
