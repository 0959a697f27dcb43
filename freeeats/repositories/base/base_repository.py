"""
Base repository with standardized CRUD operations and error handling.

Provides the foundation for all domain repositories. Every SQLAlchemy
failure surfaces as a RepositoryError so services never see driver
exceptions.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from freeeats.core.exceptions import (
    EntityAlreadyExistsError,
    RepositoryError,
    ResourceNotFoundError,
)
from freeeats.core.logging import get_logger
from freeeats.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model class.

    Write methods flush and leave committing to the service transaction.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    # ==================== Create Operations ====================

    def create(self, entity: ModelType) -> ModelType:
        """
        Persist a new entity.

        Raises:
            EntityAlreadyExistsError: On a unique constraint violation
        """
        try:
            self.db.add(entity)
            self.db.flush()
            logger.debug(f"Created {self.model.__name__} with id: {entity.id}")
            return entity
        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Create failed: {str(e)}") from e

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        try:
            return self.db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by ID failed: {str(e)}") from e

    def get_by_id(self, id: str) -> ModelType:
        """
        Get entity by ID or raise.

        Raises:
            ResourceNotFoundError: If the entity does not exist
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError(self.model.__name__, id)
        return entity

    def get_for_update(self, id: str) -> ModelType:
        """
        Load an entity holding a row lock until the surrounding transaction
        ends. Databases without row locks (SQLite) serialize writers instead.
        """
        try:
            entity = (
                self.db.query(self.model)
                .filter(self.model.id == id)
                .with_for_update()
                .populate_existing()
                .first()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find for update failed: {str(e)}") from e
        if entity is None:
            raise ResourceNotFoundError(self.model.__name__, id)
        return entity

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        skip: int = 0,
        limit: Optional[int] = 100,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching criteria.

        Args:
            criteria: Column equality filters; list/tuple values become IN
            skip: Number of records to skip
            limit: Maximum number of records, None for all
            order_by: Field names, prefix with - for descending
        """
        try:
            query = self.db.query(self.model)
            for key, value in criteria.items():
                column = getattr(self.model, key)
                if isinstance(value, (list, tuple)):
                    query = query.filter(column.in_(value))
                else:
                    query = query.filter(column == value)

            if order_by:
                for field in order_by:
                    if field.startswith('-'):
                        query = query.order_by(getattr(self.model, field[1:]).desc())
                    else:
                        query = query.order_by(getattr(self.model, field))

            query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by criteria failed: {str(e)}") from e

    def find_one_by_criteria(self, criteria: Dict[str, Any]) -> Optional[ModelType]:
        results = self.find_by_criteria(criteria, limit=1)
        return results[0] if results else None

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        try:
            query = self.db.query(self.model)
            for key, value in (criteria or {}).items():
                query = query.filter(getattr(self.model, key) == value)
            return query.count()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Count failed: {str(e)}") from e

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """
        Apply attribute changes to a loaded entity.

        JSON columns must be given fresh values; in-place mutation of the
        stored list or dict is not tracked.
        """
        try:
            for key, value in data.items():
                if not hasattr(entity, key):
                    raise AttributeError(f"{self.model.__name__} has no attribute {key}")
                setattr(entity, key, value)
            self.db.flush()
            logger.debug(f"Updated {self.model.__name__} with id: {entity.id}")
            return entity
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Update failed: {str(e)}") from e

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType) -> None:
        try:
            self.db.delete(entity)
            self.db.flush()
            logger.debug(f"Deleted {self.model.__name__} with id: {entity.id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Delete failed: {str(e)}") from e
