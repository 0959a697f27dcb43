"""
Stored object metadata for uploaded images.
"""

from sqlalchemy import BigInteger, Column, Enum, Integer, String

from freeeats.models.base import BaseModel, TimestampMixin
from freeeats.models.enums import FileStatus


class StoredFile(BaseModel, TimestampMixin):
    """
    An uploaded blob. Rows start as pending when an upload URL is issued and
    become uploaded once the bytes arrive.
    """

    __tablename__ = "stored_files"

    storage_key = Column(String(255), nullable=False, unique=True, comment="Path relative to the upload dir")
    upload_token = Column(String(64), nullable=True, comment="One-time upload token")
    upload_expires_at = Column(BigInteger, nullable=True, comment="Upload URL expiry (epoch ms)")
    content_type = Column(String(100), nullable=True)
    size = Column(Integer, nullable=True)
    uploaded_by = Column(String(36), nullable=True, comment="Uploader user id")
    status = Column(
        Enum(FileStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=FileStatus.PENDING,
    )
