"""
Notification schemas.

Dependencies: pydantic
System role: Notification API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from scm_backend.boundary.db.models import NotificationType


class NotificationResponse(BaseModel):
    """Response schema for a single notification."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    type: NotificationType
    title: str
    message: str
    data: dict
    read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Notification page with the caller's unread count."""

    notifications: list[NotificationResponse]
    unread_count: int


class BulkNotificationRequest(BaseModel):
    """
    Batch of notifications for arbitrary recipients.

    Entries stay loosely typed so incomplete ones are reported as
    INVALID_INPUT rather than a schema error.
    """

    notifications: list[dict[str, Any]] | None = None


class BulkNotificationResponse(BaseModel):
    success: bool = True
    count: int
    notifications: list[NotificationResponse]


class SystemNotificationRequest(BaseModel):
    """Broadcast to all users, or to all users of target_role."""

    type: str = ""
    title: str = ""
    message: str = ""
    data: dict[str, Any] | None = None
    target_role: str | None = None


class SystemNotificationResponse(BaseModel):
    success: bool = True
    count: int
    recipient_count: int
