from freeeats.services.storage.blob_store import BlobStore, InMemoryBlobStore, LocalBlobStore
from freeeats.services.storage.storage_service import StorageService

__all__ = ["BlobStore", "InMemoryBlobStore", "LocalBlobStore", "StorageService"]
