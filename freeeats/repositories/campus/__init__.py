from freeeats.repositories.campus.campus_repository import CampusRepository

__all__ = ["CampusRepository"]
