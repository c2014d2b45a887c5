"""
Notification API endpoints.

Routes:
- GET /notifications - Caller's notifications with unread count
- GET /notifications/unread - Unread count
- PUT /notifications/read-all - Mark everything read
- POST /notifications/bulk - Admin batch send
- POST /notifications/system - Admin broadcast, optionally per role
- PUT /notifications/{id}/read - Mark one read
- DELETE /notifications/{id} - Delete one

Dependencies: scm_backend.application.services, scm_backend.models
System role: Notification inbox HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from scm_backend.api.deps.dependencies import get_current_user_id, get_notification_service
from scm_backend.api.error_handling import handle_domain_errors
from scm_backend.application.services.notification_service import NotificationService
from scm_backend.models.common import CountResponse
from scm_backend.models.notification import (
    BulkNotificationRequest,
    BulkNotificationResponse,
    NotificationListResponse,
    NotificationResponse,
    SystemNotificationRequest,
    SystemNotificationResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
@handle_domain_errors
async def list_notifications(
    unread_only: bool = False,
    limit: int = Query(default=50, ge=1, le=200),
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """
    List the caller's notifications, newest first.

    Args:
        unread_only: Only return unread notifications
        limit: Maximum number returned (default 50)
    """
    notifications = await service.list_notifications(user_id, unread_only=unread_only, limit=limit)
    unread_count = await service.get_unread_count(user_id)
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(n) for n in notifications],
        unread_count=unread_count,
    )


@router.get("/unread", response_model=CountResponse)
@handle_domain_errors
async def get_unread_count(
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> CountResponse:
    return CountResponse(count=await service.get_unread_count(user_id))


@router.put("/read-all", response_model=CountResponse)
@handle_domain_errors
async def mark_all_as_read(
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> CountResponse:
    """Mark all of the caller's notifications read; returns how many changed."""
    return CountResponse(count=await service.mark_all_as_read(user_id))


@router.post("/bulk", response_model=BulkNotificationResponse)
@handle_domain_errors
async def create_bulk(
    request: BulkNotificationRequest,
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> BulkNotificationResponse:
    """
    Raises:
        HTTPException(403): Caller is not an admin
        HTTPException(400): INVALID_INPUT or INVALID_TYPE
    """
    created = await service.create_bulk(user_id, request.notifications)
    return BulkNotificationResponse(
        count=len(created),
        notifications=[NotificationResponse.model_validate(n) for n in created],
    )


@router.post("/system", response_model=SystemNotificationResponse)
@handle_domain_errors
async def send_system_notification(
    request: SystemNotificationRequest,
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> SystemNotificationResponse:
    """
    Raises:
        HTTPException(403): Caller is not an admin
        HTTPException(400): INVALID_INPUT, INVALID_TYPE or NO_RECIPIENTS
    """
    count = await service.send_system_notification(
        user_id,
        request.type,
        request.title,
        request.message,
        data=request.data,
        target_role=request.target_role,
    )
    return SystemNotificationResponse(count=count, recipient_count=count)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
@handle_domain_errors
async def mark_as_read(
    notification_id: UUID,
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    """
    Raises:
        HTTPException(404): Notification not found
        HTTPException(403): Notification belongs to another user
    """
    notification = await service.mark_as_read(user_id, notification_id)
    return NotificationResponse.model_validate(notification)


@router.delete("/{notification_id}", status_code=204)
@handle_domain_errors
async def delete_notification(
    notification_id: UUID,
    user_id: str = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service),
) -> None:
    """
    Raises:
        HTTPException(404): Notification not found
        HTTPException(403): Notification belongs to another user
    """
    await service.delete_notification(user_id, notification_id)
