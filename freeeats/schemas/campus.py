"""
Campus and geocoding schemas.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from freeeats.schemas.common import BaseSchema

__all__ = ["CampusResponse", "AddressSuggestion"]


class CampusResponse(BaseSchema):
    id: str
    name: str
    city: str
    state: str = Field(..., description="US state code")
    latitude: float
    longitude: float


class AddressSuggestion(BaseSchema):
    """
    One geocoder candidate. Keeps the geocoder's own field names, which the
    map widget consumes directly.
    """

    model_config = ConfigDict(alias_generator=None, from_attributes=True, populate_by_name=True)

    display_name: str
    lat: str
    lon: str
