"""
Notification service orchestrator.

Creates and manages per-user notifications. Single notifications emitted
as a side effect never raise, so a notification failure cannot break the
operation that emitted it. Admin batch and broadcast sends validate their
input and raise.

Dependencies: scm_backend.boundary.db.CRUD, scm_backend.boundary.db.models
System role: Notification use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.db.CRUD import notification_crud, user_crud
from scm_backend.boundary.db.models import NotificationModel, NotificationType, UserRole
from scm_backend.core.exceptions import NotFoundError, PermissionDeniedError, ValidationError

logger = logging.getLogger(__name__)

# Types an admin or internal caller may send directly
BROADCAST_TYPES = frozenset(
    {
        NotificationType.GENERAL,
        NotificationType.ORDER_UPDATE,
        NotificationType.INVENTORY_ALERT,
        NotificationType.INTEGRATION_STATUS,
    }
)


class NotificationService:
    """Notification service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize notification service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_notification(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> NotificationModel | None:
        """
        Persist a notification for a user.

        Args:
            user_id: Recipient user id
            type: NotificationType value
            title: Short headline
            message: Body text
            data: Optional JSON payload

        Returns:
            NotificationModel, or None when it could not be stored
        """
        try:
            notification = await notification_crud.create(
                self.db,
                user_id=str(user_id),
                type=NotificationType(type),
                title=title,
                message=message,
                data=dict(data or {}),
                read=False,
            )
            await self.db.commit()
            return notification
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Error creating notification",
                extra={"error": str(e), "user_id": str(user_id), "type": str(type)},
            )
            return None

    async def create_order_notification(
        self,
        user_id: str,
        order_id: str,
        order_number: str,
        status: str,
    ) -> NotificationModel | None:
        title = f"Order {order_number} Updated"
        message = f"Your order status has been updated to {status}"
        if status == "SHIPPED":
            title = f"Order {order_number} Shipped"
            message = "Your order has been shipped and is on its way!"
        elif status == "DELIVERED":
            title = f"Order {order_number} Delivered"
            message = "Your order has been delivered. Enjoy!"

        return await self.create_notification(
            user_id,
            NotificationType.ORDER_UPDATE.value,
            title,
            message,
            {"orderId": str(order_id), "orderNumber": order_number, "status": status},
        )

    async def create_inventory_alert(
        self,
        user_id: str,
        product_id: str,
        product_name: str,
        current_stock: int,
        threshold: int,
    ) -> NotificationModel | None:
        return await self.create_notification(
            user_id,
            NotificationType.INVENTORY_ALERT.value,
            "Low Inventory Alert",
            f"{product_name} is running low on stock ({current_stock}/{threshold} remaining)",
            {
                "productId": str(product_id),
                "productName": product_name,
                "currentStock": current_stock,
                "threshold": threshold,
            },
        )

    async def create_integration_notification(
        self,
        user_id: str,
        integration: str,
        status: str,
        details: str | None = None,
    ) -> NotificationModel | None:
        """
        Notify about an integration status change.

        Args:
            status: "connected", "disconnected" or "error"
            details: Optional message overriding the default text
        """
        return await self.create_notification(
            user_id,
            NotificationType.INTEGRATION_STATUS.value,
            f"Integration {status.capitalize()}",
            details or f"Your {integration} integration has been {status}",
            {"integration": integration, "status": status, "details": details},
        )

    async def list_notifications(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[NotificationModel]:
        return await notification_crud.get_by_user(
            self.db, str(user_id), unread_only=unread_only, limit=limit
        )

    async def get_unread_count(self, user_id: str) -> int:
        return await notification_crud.count_unread(self.db, str(user_id))

    async def _get_owned(self, user_id: str, notification_id: UUID) -> NotificationModel:
        notification = await notification_crud.get_by_id(self.db, notification_id)
        if notification is None:
            raise NotFoundError("notification", notification_id)
        if notification.user_id != str(user_id):
            raise PermissionDeniedError("You don't have permission to access this notification")
        return notification

    async def mark_as_read(self, user_id: str, notification_id: UUID) -> NotificationModel:
        """
        Mark one of the caller's notifications as read.

        Raises:
            NotFoundError: Notification does not exist
            PermissionDeniedError: Notification belongs to another user
        """
        notification = await self._get_owned(user_id, notification_id)
        notification.read = True
        await self.db.commit()
        return notification

    async def mark_all_as_read(self, user_id: str) -> int:
        count = await notification_crud.mark_all_read(self.db, str(user_id))
        await self.db.commit()
        logger.info("Notifications marked read", extra={"user_id": str(user_id), "count": count})
        return count

    async def delete_notification(self, user_id: str, notification_id: UUID) -> None:
        """
        Raises:
            NotFoundError: Notification does not exist
            PermissionDeniedError: Notification belongs to another user
        """
        await self._get_owned(user_id, notification_id)
        await notification_crud.delete_by_id(self.db, notification_id)
        await self.db.commit()

    async def _require_admin(self, user_id: str) -> None:
        try:
            user = await user_crud.get_by_id(self.db, UUID(str(user_id)))
        except ValueError:
            user = None
        if user is None or user.role != UserRole.ADMIN:
            raise PermissionDeniedError("Admin access required")

    @staticmethod
    def _broadcast_type(value: str, message: str) -> NotificationType:
        try:
            notification_type = NotificationType(value)
        except ValueError:
            notification_type = None
        if notification_type not in BROADCAST_TYPES:
            raise ValidationError(message, field="type", details={"code": "INVALID_TYPE"})
        return notification_type

    async def _insert_all(self, rows: list[dict[str, Any]]) -> list[NotificationModel]:
        try:
            created = [
                await notification_crud.create(self.db, read=False, **row) for row in rows
            ]
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return created

    async def create_bulk(
        self,
        creator_id: str,
        notifications: list[dict[str, Any]] | None,
    ) -> list[NotificationModel]:
        """
        Insert a batch of notifications for arbitrary recipients.

        Every entry is validated before anything is written; the batch is
        stored in one transaction.

        Args:
            creator_id: Admin issuing the batch
            notifications: Entries with user_id, type, title, message and
                optional data

        Raises:
            PermissionDeniedError: Caller is not an admin
            ValidationError: Empty batch, incomplete entry (INVALID_INPUT)
                or unsupported type (INVALID_TYPE)
        """
        await self._require_admin(creator_id)
        if not notifications:
            raise ValidationError(
                "A non-empty array of notifications is required",
                field="notifications",
                details={"code": "INVALID_INPUT"},
            )

        rows = []
        for entry in notifications:
            if not all(entry.get(key) for key in ("user_id", "type", "title", "message")):
                raise ValidationError(
                    "Each notification must have user_id, type, title, and message",
                    details={"code": "INVALID_INPUT"},
                )
            rows.append(
                {
                    "user_id": str(entry["user_id"]),
                    "type": self._broadcast_type(
                        entry["type"], f"Invalid notification type: {entry['type']}"
                    ),
                    "title": entry["title"],
                    "message": entry["message"],
                    "data": dict(entry.get("data") or {}),
                }
            )

        created = await self._insert_all(rows)
        logger.info("Bulk notifications created", extra={"creator_id": str(creator_id), "count": len(created)})
        return created

    async def send_system_notification(
        self,
        admin_id: str,
        type: str,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
        target_role: str | None = None,
    ) -> int:
        """
        Broadcast one notification to every user, or to every user of a role.

        Returns:
            int: Number of recipients notified

        Raises:
            PermissionDeniedError: Caller is not an admin
            ValidationError: Missing fields (INVALID_INPUT), unsupported
                type (INVALID_TYPE) or no matching users (NO_RECIPIENTS)
        """
        await self._require_admin(admin_id)
        if not type or not title or not message:
            raise ValidationError(
                "Type, title, and message are required",
                details={"code": "INVALID_INPUT"},
            )
        notification_type = self._broadcast_type(type, "Invalid notification type")

        if target_role:
            try:
                role = UserRole(target_role.upper())
            except ValueError:
                recipients = []
            else:
                recipients = await user_crud.find_many(self.db, role=role)
        else:
            recipients = await user_crud.get_all(self.db)
        if not recipients:
            raise ValidationError(
                "No users match the target criteria",
                field="target_role",
                details={"code": "NO_RECIPIENTS"},
            )

        created = await self._insert_all(
            [
                {
                    "user_id": str(recipient.id),
                    "type": notification_type,
                    "title": title,
                    "message": message,
                    "data": dict(data or {}),
                }
                for recipient in recipients
            ]
        )
        logger.info(
            "System notification sent",
            extra={"admin_id": str(admin_id), "target_role": target_role, "count": len(created)},
        )
        return len(created)
