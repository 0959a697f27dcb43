"""
Address lookup biased toward a campus, backed by OpenStreetMap Nominatim.
"""

from typing import List, Optional

import requests

from freeeats.config.settings import Settings, settings
from freeeats.core.exceptions import ExternalServiceError
from freeeats.core.logging import get_logger
from freeeats.models.campus import Campus
from freeeats.schemas.campus import AddressSuggestion

logger = get_logger(__name__)

MIN_QUERY_LENGTH = 3


class GeocodingService:
    """
    Looks up street addresses near a campus.

    Results are biased to a box around the campus center but not bounded
    to it, so nearby off-campus addresses still resolve.
    """

    def __init__(self, config: Settings = settings, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def search_address(self, campus: Campus, query: str) -> List[AddressSuggestion]:
        """
        Args:
            campus: Campus whose center biases the search
            query: Free text address

        Returns:
            Up to GEOCODING_LIMIT suggestions; [] for queries shorter than
            three characters

        Raises:
            ExternalServiceError: Transport failure or non-2xx response
        """
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        delta = self.config.GEOCODING_VIEWBOX_DELTA
        viewbox = ",".join(str(v) for v in (
            campus.longitude - delta,
            campus.latitude + delta,
            campus.longitude + delta,
            campus.latitude - delta,
        ))
        params = {
            "q": query,
            "format": "json",
            "limit": self.config.GEOCODING_LIMIT,
            "viewbox": viewbox,
            "bounded": 0,
        }
        headers = {"User-Agent": self.config.GEOCODING_USER_AGENT}

        try:
            response = self.session.get(
                self.config.GEOCODING_URL,
                params=params,
                headers=headers,
                timeout=self.config.GEOCODING_TIMEOUT,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning(f"Geocoding request failed: {e}")
            raise ExternalServiceError("geocoding", "Address lookup is unavailable") from e
        if not isinstance(data, list):
            logger.warning(f"Unexpected geocoding response: {str(data)[:200]}")
            raise ExternalServiceError("geocoding", "Address lookup is unavailable")

        results = []
        for item in data[: self.config.GEOCODING_LIMIT]:
            if not isinstance(item, dict) or not all(k in item for k in ("display_name", "lat", "lon")):
                continue
            results.append(AddressSuggestion(
                display_name=item["display_name"],
                lat=str(item["lat"]),
                lon=str(item["lon"]),
            ))
        return results
