from freeeats.services.campus.campus_search import search_campuses
from freeeats.services.campus.campus_service import CampusService

__all__ = ["CampusService", "search_campuses"]
