"""
Object storage for post and review images.

Uploads are two-step: ``generate_upload_url`` issues a pending record with a
one-time token, then the client sends the raw bytes to that URL. Files are
referenced elsewhere only by id.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Tuple
from uuid import uuid4

from sqlalchemy.orm import Session

from freeeats.config.settings import Settings, settings
from freeeats.core.exceptions import AuthorizationError, ResourceNotFoundError, ValidationError
from freeeats.models.enums import FileStatus
from freeeats.models.stored_file import StoredFile
from freeeats.repositories.storage import StoredFileRepository
from freeeats.schemas.storage import StoredFileResponse, UploadUrlResponse
from freeeats.services.base import BaseService
from freeeats.services.storage.blob_store import BlobStore
from freeeats.utils.datetime_utils import is_expired, now_ms


class StorageService(BaseService):

    def __init__(self, db_session: Session, blob_store: BlobStore, config: Settings = settings):
        super().__init__(db_session)
        self.repository = StoredFileRepository(db_session)
        self.blob_store = blob_store
        self.config = config

    # ------------------------------------------------------------------ #
    # Upload lifecycle
    # ------------------------------------------------------------------ #
    def generate_upload_url(self, uploaded_by: Optional[str] = None) -> UploadUrlResponse:
        """Create a pending file record and return its one-time upload URL."""
        token = secrets.token_urlsafe(32)
        expires_at = now_ms() + self.config.UPLOAD_URL_TTL_SECONDS * 1000
        day = datetime.now(timezone.utc).strftime("%Y/%m/%d")

        with self.transaction():
            record = self.repository.create(StoredFile(
                storage_key=f"{day}/{uuid4().hex}",
                upload_token=token,
                upload_expires_at=expires_at,
                uploaded_by=uploaded_by,
                status=FileStatus.PENDING,
            ))
            file_id = record.id

        base = self.config.PUBLIC_BASE_URL.rstrip("/")
        return UploadUrlResponse(
            upload_url=f"{base}{self.config.API_V1_STR}/storage/upload/{file_id}?token={token}",
            storage_id=file_id,
            expires_at=expires_at,
        )

    def store_upload(
        self,
        file_id: str,
        token: str,
        content_type: Optional[str],
        data: bytes,
    ) -> StoredFileResponse:
        """
        Accept the bytes for a pending upload.

        Raises:
            ResourceNotFoundError: Unknown file id
            AuthorizationError: Token mismatch or URL already used
            ValidationError: Expired URL, unsupported type or bad size
        """
        content_type = (content_type or "").split(";")[0].strip().lower()

        with self.transaction():
            record = self.repository.get_for_update(file_id)
            if record.status != FileStatus.PENDING or not record.upload_token:
                raise AuthorizationError("Upload URL has already been used", action="upload")
            if not secrets.compare_digest(record.upload_token, token or ""):
                raise AuthorizationError("Invalid upload token", action="upload")
            if record.upload_expires_at is not None and is_expired(record.upload_expires_at):
                raise ValidationError("Upload URL has expired")
            self._validate_image(content_type, data)

            self.blob_store.save(record.storage_key, data)
            self.repository.update(record, {
                "status": FileStatus.UPLOADED,
                "upload_token": None,
                "content_type": content_type,
                "size": len(data),
            })
            self._logger.info(f"Stored upload {file_id} ({len(data)} bytes)")
            return self._to_response(record)

    def _validate_image(self, content_type: str, data: bytes) -> None:
        if content_type not in self.config.ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                "Unsupported file type",
                field_errors={"contentType": [f"{content_type or 'unknown'} is not an allowed image type"]},
            )
        if not data:
            raise ValidationError("Empty upload")
        if len(data) > self.max_upload_size:
            raise self.file_too_large()

    @property
    def max_upload_size(self) -> int:
        return self.config.MAX_UPLOAD_SIZE

    def file_too_large(self) -> ValidationError:
        return ValidationError(
            "File too large",
            field_errors={"file": [f"Maximum size is {self.max_upload_size} bytes"]},
        )

    # ------------------------------------------------------------------ #
    # Read operations
    # ------------------------------------------------------------------ #
    def get_url(self, file_id: Optional[str]) -> Optional[str]:
        """Public download URL of an uploaded file, or None."""
        if not file_id:
            return None
        return self.get_urls([file_id]).get(file_id)

    def get_urls(self, file_ids: Iterable[Optional[str]]) -> Dict[str, str]:
        ids = list({i for i in file_ids if i})
        if not ids:
            return {}
        records = self.repository.find_by_criteria(
            {"id": ids, "status": FileStatus.UPLOADED}, limit=None
        )
        return {r.id: self._download_url(r.id) for r in records}

    def _download_url(self, file_id: str) -> str:
        base = self.config.PUBLIC_BASE_URL.rstrip("/")
        return f"{base}{self.config.API_V1_STR}/storage/{file_id}"

    def require_uploaded(self, file_id: str) -> StoredFile:
        """
        Raises:
            ValidationError: When the id does not name an uploaded file
        """
        record = self.repository.find_uploaded(file_id)
        if record is None:
            raise ValidationError(
                "Image not found", field_errors={"imageId": ["No uploaded image with this id"]}
            )
        return record

    def read(self, file_id: str) -> Tuple[bytes, str]:
        """Bytes and content type of an uploaded file."""
        record = self.repository.find_uploaded(file_id)
        data = self.blob_store.load(record.storage_key) if record else None
        if data is None:
            raise ResourceNotFoundError("File", file_id)
        return data, record.content_type or "application/octet-stream"

    def read_optional(self, file_id: Optional[str]) -> Optional[Tuple[bytes, str]]:
        if not file_id:
            return None
        try:
            return self.read(file_id)
        except ResourceNotFoundError:
            return None

    # ------------------------------------------------------------------ #
    # Delete
    # ------------------------------------------------------------------ #
    def delete(self, file_id: Optional[str]) -> bool:
        """
        Remove a file's record inside the caller's transaction. The bytes
        are removed once that transaction commits. Returns False when
        nothing was stored.
        """
        if not file_id:
            return False
        record = self.repository.find_by_id(file_id)
        if record is None:
            return False
        storage_key = record.storage_key
        self.repository.delete(record)
        self.after_commit(lambda: self.blob_store.delete(storage_key))
        self._logger.info(f"Deleted stored file {file_id}")
        return True

    def _to_response(self, record: StoredFile) -> StoredFileResponse:
        return StoredFileResponse(
            id=record.id,
            content_type=record.content_type,
            size=record.size,
            status=record.status,
            url=self._download_url(record.id) if record.status == FileStatus.UPLOADED else None,
        )
