"""
Shared fixtures: an in-memory SQLite database and factories for the
entities most tests need.
"""

import unittest
from typing import Optional
from unittest.mock import Mock

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from freeeats.config.settings import Settings
from freeeats.db.base import Base
from freeeats.models import Campus, FoodPost, FoodType, User
from freeeats.services.moderation import ContentModerator, ModerationResult
from freeeats.services.storage import InMemoryBlobStore, StorageService
from freeeats.utils.datetime_utils import now_ms

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET_KEY": "test-secret",
        "JWT_ALGORITHM": "HS256",
        "CLERK_JWKS_URL": None,
        "GOOGLE_GENERATIVE_AI_API_KEY": None,
        "PUBLIC_BASE_URL": "http://testserver",
        "MAX_UPLOAD_SIZE": 1024,
        "SEED_CAMPUSES_ON_STARTUP": False,
    }
    values.update(overrides)
    return Settings(**values)


def make_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def accepting_moderator() -> Mock:
    moderator = Mock(spec=ContentModerator)
    moderator.moderate.return_value = ModerationResult(is_valid=True)
    return moderator


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test."""

    def setUp(self):
        self.engine = make_engine()
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        self.db = self.SessionLocal()
        self.config = make_settings()
        self.blob_store = InMemoryBlobStore()
        self.storage = StorageService(self.db, self.blob_store, self.config)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    # ------------------------------------------------------------------ #
    # Factories
    # ------------------------------------------------------------------ #
    def make_campus(self, name="Test University", city="Springfield", state="IL",
                    latitude=40.0, longitude=-88.0) -> Campus:
        campus = Campus(name=name, city=city, state=state, latitude=latitude, longitude=longitude)
        self.db.add(campus)
        self.db.commit()
        return campus

    def make_user(self, clerk_id="user_1", name="Alex", **fields) -> User:
        user = User(clerk_id=clerk_id, name=name, **fields)
        self.db.add(user)
        self.db.commit()
        return user

    def make_post(self, user: User, campus: Campus, title="Free pizza", food_type=FoodType.PIZZA,
                  minutes_left: int = 60, creation_time: Optional[int] = None, **fields) -> FoodPost:
        now = now_ms()
        values = dict(
            title=title,
            food_type=food_type,
            campus_id=campus.id,
            location_name="Student Union",
            latitude=campus.latitude,
            longitude=campus.longitude,
            expires_at=now + minutes_left * 60000,
            created_by=user.id,
            is_active=True,
            gone_reports=0,
            reported_by=[],
        )
        if creation_time is not None:
            values["creation_time"] = creation_time
        values.update(fields)
        post = FoodPost(**values)
        self.db.add(post)
        self.db.commit()
        return post

    def upload_image(self, user: Optional[User] = None, data: bytes = PNG_BYTES) -> str:
        target = self.storage.generate_upload_url(uploaded_by=user.id if user else None)
        token = target.upload_url.split("token=")[1]
        self.storage.store_upload(target.storage_id, token, "image/png", data)
        return target.storage_id
