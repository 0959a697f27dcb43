"""
Campus directory service.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from freeeats.repositories.campus import CampusRepository
from freeeats.schemas.campus import AddressSuggestion, CampusResponse
from freeeats.services.base import BaseService
from freeeats.services.campus.campus_search import search_campuses
from freeeats.services.geocoding import GeocodingService


class CampusService(BaseService):

    def __init__(self, db_session: Session, geocoder: Optional[GeocodingService] = None):
        super().__init__(db_session)
        self.repository = CampusRepository(db_session)
        self.geocoder = geocoder

    def list_campuses(self, state: Optional[str] = None) -> List[CampusResponse]:
        if state:
            campuses = self.repository.find_by_criteria(
                {"state": state.strip().upper()}, limit=None, order_by=["name", "id"]
            )
        else:
            campuses = self.repository.list_all()
        return [CampusResponse.model_validate(c) for c in campuses]

    def search(self, query: str) -> List[CampusResponse]:
        if not (query or "").strip():
            return []
        results = search_campuses(self.repository.list_all(), query)
        return [CampusResponse.model_validate(c) for c in results]

    def get_campus(self, campus_id: str) -> CampusResponse:
        return CampusResponse.model_validate(self.repository.get_by_id(campus_id))

    def list_states(self) -> List[str]:
        return self.repository.list_states()

    def search_address(self, campus_id: str, query: str) -> List[AddressSuggestion]:
        """Geocode an address near the given campus."""
        campus = self.repository.get_by_id(campus_id)
        geocoder = self.geocoder or GeocodingService()
        return geocoder.search_address(campus, query)
