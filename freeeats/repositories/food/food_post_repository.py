"""
Food post repository.

Expiry is evaluated at query time against a caller supplied clock.
"""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from freeeats.core.exceptions import RepositoryError
from freeeats.models.food_post import FoodPost
from freeeats.repositories.base.base_repository import BaseRepository


class FoodPostRepository(BaseRepository[FoodPost]):

    def __init__(self, db: Session):
        super().__init__(FoodPost, db)

    def list_active_by_campus(self, campus_id: str, now: Optional[int] = None) -> List[FoodPost]:
        """
        Active posts on a campus, newest first.

        Args:
            campus_id: Campus id
            now: Current time in epoch ms; when given, expired posts are
                excluded
        """
        try:
            query = self.db.query(FoodPost).filter(
                FoodPost.campus_id == campus_id,
                FoodPost.is_active.is_(True),
            )
            if now is not None:
                query = query.filter(FoodPost.expires_at > now)
            return query.order_by(FoodPost.creation_time.desc(), FoodPost.id).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"List campus posts failed: {str(e)}") from e

    def list_by_creator(self, user_id: str) -> List[FoodPost]:
        """Every post by a user regardless of state, newest first."""
        return self.find_by_criteria(
            {"created_by": user_id}, limit=None, order_by=["-creation_time", "id"]
        )
