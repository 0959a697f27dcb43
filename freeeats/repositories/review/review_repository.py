"""
Review repository with rating aggregation helpers.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from freeeats.core.exceptions import RepositoryError
from freeeats.models.review import Review
from freeeats.repositories.base.base_repository import BaseRepository


class ReviewRepository(BaseRepository[Review]):

    def __init__(self, db: Session):
        super().__init__(Review, db)

    def list_by_food_post(self, food_post_id: str) -> List[Review]:
        return self.find_by_criteria(
            {"food_post_id": food_post_id}, limit=None, order_by=["-creation_time", "id"]
        )

    def find_by_post_and_user(self, food_post_id: str, user_id: str) -> Optional[Review]:
        return self.find_one_by_criteria({"food_post_id": food_post_id, "user_id": user_id})

    def rating_totals(self, food_post_ids: Iterable[str]) -> Dict[str, Tuple[int, int]]:
        """
        Sum and count of ratings per post.

        Returns:
            Mapping of post id to (rating_sum, review_count); posts without
            reviews are absent
        """
        ids = list(set(food_post_ids))
        if not ids:
            return {}
        try:
            rows = (
                self.db.query(Review.food_post_id, func.sum(Review.rating), func.count(Review.id))
                .filter(Review.food_post_id.in_(ids))
                .group_by(Review.food_post_id)
                .all()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Rating aggregation failed: {str(e)}") from e
        return {post_id: (int(total), int(count)) for post_id, total, count in rows}
