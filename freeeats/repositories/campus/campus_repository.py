"""
Campus repository: read access to the static campus directory.
"""

from typing import Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from freeeats.core.exceptions import RepositoryError
from freeeats.models.campus import Campus
from freeeats.repositories.base.base_repository import BaseRepository


class CampusRepository(BaseRepository[Campus]):

    def __init__(self, db: Session):
        super().__init__(Campus, db)

    def list_all(self) -> List[Campus]:
        """All campuses ordered by name."""
        try:
            return self.db.query(Campus).order_by(Campus.name, Campus.id).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"List campuses failed: {str(e)}") from e

    def list_states(self) -> List[str]:
        """Distinct state codes, sorted."""
        try:
            rows = self.db.query(Campus.state).distinct().order_by(Campus.state).all()
            return [row[0] for row in rows]
        except SQLAlchemyError as e:
            raise RepositoryError(f"List states failed: {str(e)}") from e

    def find_by_ids(self, ids: Iterable[str]) -> List[Campus]:
        ids = list(set(ids))
        if not ids:
            return []
        return self.find_by_criteria({"id": ids}, limit=None)
