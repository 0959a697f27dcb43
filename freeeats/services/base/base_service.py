"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy.orm import Session

from freeeats.core.exceptions import BaseAppException
from freeeats.core.logging import get_logger

# Session.info key holding callbacks for the next successful commit
AFTER_COMMIT_KEY = "freeeats.after_commit"


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Transaction management utilities

    Each public operation runs inside exactly one ``transaction()``; domain
    errors raised inside it roll the session back and propagate unchanged.
    """

    def __init__(self, db_session: Session):
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__name__)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.repository.create(entity)
                # commit on success, rollback on exception
        """
        try:
            yield self.db
            self._commit()
            self._run_after_commit()
        except BaseAppException as e:
            self._rollback()
            self._logger.debug(f"Transaction aborted: {e}")
            raise
        except Exception as e:
            self._rollback()
            self._logger.error(f"Transaction failed: {e}", exc_info=True)
            raise

    def after_commit(self, callback: Callable[[], None]) -> None:
        """
        Run ``callback`` once the current transaction commits. Discarded
        on rollback. The queue lives on the session, so any service
        sharing it may register work.
        """
        self.db.info.setdefault(AFTER_COMMIT_KEY, []).append(callback)

    def _run_after_commit(self) -> None:
        for callback in self.db.info.pop(AFTER_COMMIT_KEY, []):
            try:
                callback()
            except Exception as e:
                self._logger.error(f"Post-commit action failed: {e}", exc_info=True)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception as e:
            self._logger.error(f"Commit failed: {e}", exc_info=True)
            self._rollback()
            raise

    def _rollback(self) -> None:
        """Rollback the current transaction, suppressing rollback errors."""
        self.db.info.pop(AFTER_COMMIT_KEY, None)
        try:
            self.db.rollback()
        except Exception as e:
            self._logger.warning(f"Rollback failed: {e}")
