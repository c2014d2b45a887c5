"""
Test suite for NotificationService.

System role: Verification of notification creation and inbox operations
"""

import uuid

import pytest

from scm_backend.application.services import NotificationService
from scm_backend.boundary.db.models import UserRole
from scm_backend.core.exceptions import NotFoundError, PermissionDeniedError, ValidationError

USER = "user-1"
OTHER = "user-2"


class TestCreateNotification:
    """Test suite for create_notification() and helpers."""

    async def test_create_should_persist_unread(self, test_async_db) -> None:
        service = NotificationService(test_async_db)

        notification = await service.create_notification(USER, "GENERAL", "Hello", "World", {"k": 1})

        assert notification is not None
        assert notification.read is False
        assert notification.data == {"k": 1}
        assert await service.get_unread_count(USER) == 1

    async def test_create_failure_should_return_none(self, test_async_db) -> None:
        service = NotificationService(test_async_db)

        result = await service.create_notification(USER, "NOT_A_TYPE", "t", "m")

        assert result is None
        assert await service.get_unread_count(USER) == 0

    @pytest.mark.parametrize(
        "status,title,message",
        [
            ("SHIPPED", "Order SO-1 Shipped", "Your order has been shipped and is on its way!"),
            ("DELIVERED", "Order SO-1 Delivered", "Your order has been delivered. Enjoy!"),
            ("PROCESSING", "Order SO-1 Updated", "Your order status has been updated to PROCESSING"),
        ],
    )
    async def test_order_notification_text(self, test_async_db, status, title, message) -> None:
        service = NotificationService(test_async_db)

        notification = await service.create_order_notification(USER, "o-1", "SO-1", status)

        assert (notification.title, notification.message) == (title, message)
        assert notification.type.value == "ORDER_UPDATE"

    async def test_inventory_alert_text(self, test_async_db) -> None:
        notification = await NotificationService(test_async_db).create_inventory_alert(
            USER, "p-1", "Bolt", 2, 10
        )

        assert notification.message == "Bolt is running low on stock (2/10 remaining)"
        assert notification.data["threshold"] == 10

    async def test_integration_notification_default_text(self, test_async_db) -> None:
        notification = await NotificationService(test_async_db).create_integration_notification(
            USER, "sap", "connected"
        )

        assert notification.title == "Integration Connected"
        assert notification.message == "Your sap integration has been connected"


class TestInboxOperations:
    """Test suite for read/delete operations and ownership checks."""

    async def test_mark_as_read_should_require_ownership(self, test_async_db) -> None:
        # Arrange
        service = NotificationService(test_async_db)
        notification = await service.create_notification(USER, "GENERAL", "t", "m")

        # Act / Assert
        with pytest.raises(PermissionDeniedError):
            await service.mark_as_read(OTHER, notification.id)

        updated = await service.mark_as_read(USER, notification.id)
        assert updated.read is True

    async def test_missing_notification_should_raise_not_found(self, test_async_db) -> None:
        with pytest.raises(NotFoundError):
            await NotificationService(test_async_db).mark_as_read(USER, uuid.uuid4())

    async def test_mark_all_as_read_should_return_count(self, test_async_db) -> None:
        # Arrange
        service = NotificationService(test_async_db)
        for _ in range(3):
            await service.create_notification(USER, "GENERAL", "t", "m")
        await service.create_notification(OTHER, "GENERAL", "t", "m")

        # Act
        count = await service.mark_all_as_read(USER)

        # Assert
        assert count == 3
        assert await service.get_unread_count(USER) == 0
        assert await service.get_unread_count(OTHER) == 1

    async def test_list_unread_only(self, test_async_db) -> None:
        service = NotificationService(test_async_db)
        first = await service.create_notification(USER, "GENERAL", "first", "m")
        await service.create_notification(USER, "GENERAL", "second", "m")
        await service.mark_as_read(USER, first.id)

        unread = await service.list_notifications(USER, unread_only=True)

        assert [n.title for n in unread] == ["second"]

    async def test_delete_should_remove_owned_notification(self, test_async_db) -> None:
        # Arrange
        service = NotificationService(test_async_db)
        notification = await service.create_notification(USER, "GENERAL", "t", "m")

        # Act / Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_notification(OTHER, notification.id)

        await service.delete_notification(USER, notification.id)
        assert await service.list_notifications(USER) == []


class TestAdminSends:
    """Test suite for create_bulk() and send_system_notification()."""

    async def test_bulk_should_store_every_entry(self, make_user, test_async_db) -> None:
        # Arrange
        admin = await make_user(role=UserRole.ADMIN)
        service = NotificationService(test_async_db)
        entries = [
            {"user_id": USER, "type": "GENERAL", "title": "a", "message": "m"},
            {"user_id": OTHER, "type": "ORDER_UPDATE", "title": "b", "message": "m", "data": {"orderId": "o-1"}},
        ]

        # Act
        created = await service.create_bulk(str(admin.id), entries)

        # Assert
        assert [n.title for n in created] == ["a", "b"]
        assert created[1].data == {"orderId": "o-1"}
        assert await service.get_unread_count(USER) == 1
        assert await service.get_unread_count(OTHER) == 1

    @pytest.mark.parametrize(
        "entries,code",
        [
            ([], "INVALID_INPUT"),
            (None, "INVALID_INPUT"),
            ([{"user_id": USER, "type": "GENERAL", "title": "a"}], "INVALID_INPUT"),
            ([{"user_id": USER, "type": "STOCK_MOVEMENT", "title": "a", "message": "m"}], "INVALID_TYPE"),
        ],
    )
    async def test_bulk_validation(self, make_user, test_async_db, entries, code) -> None:
        admin = await make_user(role=UserRole.ADMIN)
        service = NotificationService(test_async_db)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_bulk(str(admin.id), entries)

        assert exc_info.value.details["code"] == code
        assert await service.get_unread_count(USER) == 0

    async def test_bulk_invalid_entry_should_store_nothing(self, make_user, test_async_db) -> None:
        admin = await make_user(role=UserRole.ADMIN)
        service = NotificationService(test_async_db)
        entries = [
            {"user_id": USER, "type": "GENERAL", "title": "a", "message": "m"},
            {"user_id": USER, "type": "NOPE", "title": "b", "message": "m"},
        ]

        with pytest.raises(ValidationError, match="Invalid notification type: NOPE"):
            await service.create_bulk(str(admin.id), entries)

        assert await service.get_unread_count(USER) == 0

    async def test_system_notification_targets_role(self, make_user, test_async_db) -> None:
        # Arrange
        admin = await make_user(role=UserRole.ADMIN)
        supplier = await make_user(role=UserRole.SUPPLIER)
        customer = await make_user(role=UserRole.CUSTOMER)
        service = NotificationService(test_async_db)

        # Act
        count = await service.send_system_notification(
            str(admin.id), "GENERAL", "Maintenance", "Down at noon", target_role="supplier"
        )

        # Assert
        assert count == 1
        assert await service.get_unread_count(str(supplier.id)) == 1
        assert await service.get_unread_count(str(customer.id)) == 0

    async def test_system_notification_without_role_reaches_everyone(self, make_user, test_async_db) -> None:
        admin = await make_user(role=UserRole.ADMIN)
        await make_user()

        count = await NotificationService(test_async_db).send_system_notification(
            str(admin.id), "GENERAL", "Hello", "All"
        )

        assert count == 2

    async def test_system_notification_errors(self, make_user, test_async_db) -> None:
        admin = await make_user(role=UserRole.ADMIN)
        service = NotificationService(test_async_db)

        with pytest.raises(ValidationError) as missing:
            await service.send_system_notification(str(admin.id), "GENERAL", "", "m")
        with pytest.raises(ValidationError) as bad_type:
            await service.send_system_notification(str(admin.id), "WAREHOUSE_UPDATE", "t", "m")
        with pytest.raises(ValidationError) as nobody:
            await service.send_system_notification(str(admin.id), "GENERAL", "t", "m", target_role="employee")

        assert missing.value.details["code"] == "INVALID_INPUT"
        assert bad_type.value.details["code"] == "INVALID_TYPE"
        assert nobody.value.details["code"] == "NO_RECIPIENTS"

    async def test_admin_sends_require_admin(self, make_user, test_async_db) -> None:
        user = await make_user()
        service = NotificationService(test_async_db)

        with pytest.raises(PermissionDeniedError):
            await service.create_bulk(str(user.id), [])
        with pytest.raises(PermissionDeniedError):
            await service.send_system_notification(str(user.id), "GENERAL", "t", "m")
        with pytest.raises(PermissionDeniedError):
            await service.send_system_notification("not-a-uuid", "GENERAL", "t", "m")
