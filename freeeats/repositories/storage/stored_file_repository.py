"""
Stored file metadata repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from freeeats.models.enums import FileStatus
from freeeats.models.stored_file import StoredFile
from freeeats.repositories.base.base_repository import BaseRepository


class StoredFileRepository(BaseRepository[StoredFile]):

    def __init__(self, db: Session):
        super().__init__(StoredFile, db)

    def find_uploaded(self, file_id: str) -> Optional[StoredFile]:
        """A file whose bytes have arrived, or None."""
        return self.find_one_by_criteria({"id": file_id, "status": FileStatus.UPLOADED})
