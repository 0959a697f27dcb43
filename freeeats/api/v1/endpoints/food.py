from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from freeeats.api import deps
from freeeats.models.enums import FoodType
from freeeats.models.user import User
from freeeats.schemas.common import SuccessResponse
from freeeats.schemas.food import (
    FeedEntry,
    FoodPostCreate,
    FoodPostDetail,
    FoodPostResponse,
    FoodPostUpdate,
    ReportResult,
)
from freeeats.schemas.storage import UploadUrlResponse
from freeeats.services.food import FoodPostService

router = APIRouter(prefix="/food", tags=["Food"])


@router.post("", response_model=FoodPostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: FoodPostCreate,
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    """Publish a food post. Rejected with CONTENT_REJECTED when it is not about food."""
    return service.create(user, payload)


@router.get("", response_model=List[FoodPostDetail])
def list_posts(
    campus_id: str = Query(..., alias="campusId"),
    include_expired: bool = Query(False, alias="includeExpired"),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    return service.list_by_campus(campus_id, include_expired)


@router.get("/feed", response_model=List[FeedEntry])
def get_feed(
    campus_id: str = Query(..., alias="campusId"),
    food_type: Optional[FoodType] = Query(None, alias="foodType"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    viewer: Optional[User] = Depends(deps.get_optional_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    """Visible posts of a campus ranked by rating and the viewer's tastes."""
    return service.feed(campus_id, viewer, food_type, lat, lng)


@router.get("/mine", response_model=List[FoodPostResponse])
def list_my_posts(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    return service.list_my_posts(user)


@router.post("/upload-url", response_model=UploadUrlResponse)
def generate_upload_url(
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    return service.generate_upload_url(user)


@router.get("/{post_id}", response_model=FoodPostDetail)
def get_post(post_id: str, service: FoodPostService = Depends(deps.get_food_post_service)):
    return service.get_post(post_id)


@router.patch("/{post_id}", response_model=FoodPostResponse)
def update_post(
    post_id: str,
    patch: FoodPostUpdate,
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    return service.update(user, post_id, patch)


@router.post("/{post_id}/gone", response_model=SuccessResponse)
def mark_gone(
    post_id: str,
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    service.mark_gone(user, post_id)
    return SuccessResponse()


@router.post("/{post_id}/report", response_model=ReportResult)
def report_gone(
    post_id: str,
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    """Toggle the caller's "food is gone" report."""
    return service.report_gone(user, post_id)


@router.delete("/{post_id}/report", response_model=ReportResult)
def unreport_gone(
    post_id: str,
    user: User = Depends(deps.get_current_user),
    service: FoodPostService = Depends(deps.get_food_post_service),
):
    return service.unreport_gone(user, post_id)
