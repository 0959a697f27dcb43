from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from freeeats.api import deps
from freeeats.schemas.campus import AddressSuggestion, CampusResponse
from freeeats.services.campus import CampusService

router = APIRouter(prefix="/campuses", tags=["Campuses"])


@router.get("", response_model=List[CampusResponse])
def list_campuses(
    state: Optional[str] = Query(None, min_length=2, max_length=2, description="US state code"),
    service: CampusService = Depends(deps.get_campus_service),
):
    return service.list_campuses(state)


@router.get("/search", response_model=List[CampusResponse])
def search_campuses(
    q: str = Query("", max_length=100),
    service: CampusService = Depends(deps.get_campus_service),
):
    """Typo-tolerant search over campus name, city and state (max 50 results)."""
    return service.search(q)


@router.get("/states", response_model=List[str])
def list_states(service: CampusService = Depends(deps.get_campus_service)):
    return service.list_states()


@router.get("/{campus_id}", response_model=CampusResponse)
def get_campus(campus_id: str, service: CampusService = Depends(deps.get_campus_service)):
    return service.get_campus(campus_id)


@router.get("/{campus_id}/geocode", response_model=List[AddressSuggestion])
def geocode_address(
    campus_id: str,
    q: str = Query("", max_length=200),
    service: CampusService = Depends(deps.get_campus_service),
):
    """Address suggestions near the campus; [] for queries under 3 characters."""
    return service.search_address(campus_id, q)
