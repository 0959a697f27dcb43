from freeeats.repositories.storage.stored_file_repository import StoredFileRepository

__all__ = ["StoredFileRepository"]
