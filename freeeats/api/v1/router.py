"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints
"""
from fastapi import APIRouter

from freeeats.api.v1.endpoints import campuses, food, notifications, reviews, storage, users

router = APIRouter(
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(campuses.router)
router.include_router(users.router)
router.include_router(food.router)
router.include_router(reviews.post_reviews_router)
router.include_router(reviews.router)
router.include_router(notifications.router)
router.include_router(storage.router)
