"""
Object storage schemas.
"""

from __future__ import annotations

from typing import Optional

from freeeats.models.enums import FileStatus
from freeeats.schemas.common import BaseSchema

__all__ = ["UploadUrlResponse", "StoredFileResponse"]


class UploadUrlResponse(BaseSchema):
    """
    A one-time upload target. The client POSTs the raw image bytes to
    upload_url and then submits storage_id as an imageId.
    """

    upload_url: str
    storage_id: str
    expires_at: int


class StoredFileResponse(BaseSchema):
    id: str
    content_type: Optional[str] = None
    size: Optional[int] = None
    status: FileStatus
    url: Optional[str] = None
