from typing import List, Optional

from fastapi import APIRouter, Depends

from freeeats.api import deps
from freeeats.models.user import User
from freeeats.schemas.common import SuccessResponse
from freeeats.schemas.notification import NotificationResponse, UnreadCount
from freeeats.services.notification import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=List[NotificationResponse])
def list_notifications(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: NotificationService = Depends(deps.get_notification_service),
):
    return service.list_for_user(user)


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    user: Optional[User] = Depends(deps.get_optional_user),
    service: NotificationService = Depends(deps.get_notification_service),
):
    return UnreadCount(count=service.unread_count(user))


@router.post("/read-all", response_model=SuccessResponse)
def mark_all_as_read(
    user: User = Depends(deps.get_current_user),
    service: NotificationService = Depends(deps.get_notification_service),
):
    service.mark_all_as_read(user)
    return SuccessResponse()


@router.post("/{notification_id}/read", response_model=SuccessResponse)
def mark_as_read(
    notification_id: str,
    user: User = Depends(deps.get_current_user),
    service: NotificationService = Depends(deps.get_notification_service),
):
    service.mark_as_read(user, notification_id)
    return SuccessResponse()
