"""
User repository.
"""

from typing import Dict, Iterable, Optional

from sqlalchemy.orm import Session

from freeeats.models.user import User
from freeeats.repositories.base.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):

    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_clerk_id(self, clerk_id: str) -> Optional[User]:
        """Look up a user by identity-provider subject."""
        return self.find_one_by_criteria({"clerk_id": clerk_id})

    def get_map(self, ids: Iterable[str]) -> Dict[str, User]:
        """Batch-load users keyed by id; unknown ids are skipped."""
        ids = list(set(i for i in ids if i))
        if not ids:
            return {}
        return {u.id: u for u in self.find_by_criteria({"id": ids}, limit=None)}
