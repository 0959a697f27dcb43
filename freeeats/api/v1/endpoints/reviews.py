from typing import List, Optional

from fastapi import APIRouter, Depends

from freeeats.api import deps
from freeeats.models.user import User
from freeeats.schemas.common import SuccessResponse
from freeeats.schemas.review import (
    ReviewCreate,
    ReviewDetail,
    ReviewResponse,
    ReviewStats,
    ReviewUpsertResult,
)
from freeeats.schemas.storage import UploadUrlResponse
from freeeats.services.review import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])

# Reviews addressed through their food post
post_reviews_router = APIRouter(prefix="/food/{post_id}/reviews", tags=["Reviews"])


@router.post("", response_model=ReviewUpsertResult)
def add_review(
    payload: ReviewCreate,
    user: User = Depends(deps.get_current_user),
    service: ReviewService = Depends(deps.get_review_service),
):
    return service.add_review(user, payload)


@router.post("/upload-url", response_model=UploadUrlResponse)
def generate_upload_url(
    user: User = Depends(deps.get_current_user),
    service: ReviewService = Depends(deps.get_review_service),
):
    return service.generate_upload_url(user)


@router.delete("/{review_id}", response_model=SuccessResponse)
def delete_review(
    review_id: str,
    user: User = Depends(deps.get_current_user),
    service: ReviewService = Depends(deps.get_review_service),
):
    service.delete_review(user, review_id)
    return SuccessResponse()


@post_reviews_router.get("", response_model=List[ReviewDetail])
def list_reviews(post_id: str, service: ReviewService = Depends(deps.get_review_service)):
    return service.list_for_post(post_id)


@post_reviews_router.get("/stats", response_model=ReviewStats)
def review_stats(post_id: str, service: ReviewService = Depends(deps.get_review_service)):
    return service.get_stats(post_id)


@post_reviews_router.get("/me", response_model=Optional[ReviewResponse])
def my_review(
    post_id: str,
    user: Optional[User] = Depends(deps.get_optional_user),
    service: ReviewService = Depends(deps.get_review_service),
):
    return service.get_user_review(user, post_id)
