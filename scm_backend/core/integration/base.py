"""
Integration adapter contracts.

Defines the result types shared by every vendor adapter and the abstract
IntegrationService that implements the common fetch template:
connection check, guarded per-entity steps, per-record isolation,
completion notification and result aggregation.

Dependencies: pydantic, sqlalchemy
System role: Core integration abstractions used by adapters and the manager
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scm_backend.boundary.vendors.base_client import VendorApiClient

logger = logging.getLogger(__name__)

RecordOutcome = dict[str, Any]


class IntegrationCategory(str, Enum):
    """Integration categories a user can configure."""

    ECOMMERCE = "ecommerce"
    ERP_CRM = "erp_crm"
    IOT = "iot"
    BI_TOOLS = "bi_tools"


class FetchResult(BaseModel):
    """Outcome of one adapter fetch/push run."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    errors: list[str] | None = None


class SyncResult(BaseModel):
    """Outcome of a sync, as reported by the integration manager."""

    success: bool
    message: str
    synced_entities: int | None = None
    errors: list[str] | None = None


class Notifier(Protocol):
    """Anything able to persist a user notification."""

    async def create_notification(
        self,
        user_id: str,
        type: str,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> Any: ...


def describe_error(error: Exception) -> str:
    """
    Short, user-facing reason for a failed step.

    Database errors are reduced to the driver message so the SQL statement
    and its bound parameters never reach results or notifications.
    """
    if isinstance(error, SQLAlchemyError):
        orig = getattr(error, "orig", None)
        return str(orig) if orig is not None else type(error).__name__
    return str(error)


def count_synced(data: dict[str, Any] | None) -> int:
    """
    Count successful record outcomes in a fetch result payload.

    Lists contribute their entries without an "error" key; a single dict
    outcome (shop info, Power BI table push) counts as one.
    """
    if not data:
        return 0
    total = 0
    for outcome in data.values():
        if isinstance(outcome, list):
            total += sum(
                1 for item in outcome if isinstance(item, dict) and "error" not in item
            )
        elif isinstance(outcome, dict) and "error" not in outcome:
            total += 1
    return total


class IntegrationService(ABC):
    """
    Base class for vendor adapters.

    Subclasses provide the vendor client and the ordered list of steps.
    Each step returns the outcomes for one entity type; a raising step is
    rolled back and recorded as "<Entity> <operation> failed: <reason>"
    while the remaining steps still run. Notifications raised inside a step
    go through `notify` and are only sent once that step has committed.
    """

    vendor_name: str = "Vendor"
    vendor_label: str | None = None
    operation: str = "fetch"
    operation_past: str = "fetched"
    preposition: str = "from"
    not_connected_hint: str = "API key"

    def __init__(
        self,
        client: VendorApiClient,
        user_id: str,
        db: AsyncSession,
        notifier: Notifier,
    ) -> None:
        """
        Initialize adapter.

        Args:
            client: Vendor API client
            user_id: Owner of the integration and of the synced records
            db: Async SQLAlchemy session
            notifier: Notification sink
        """
        self.client = client
        self.user_id = str(user_id)
        self.db = db
        self.notifier = notifier
        self._pending_notifications: list[tuple[str, str, str, dict[str, Any] | None]] = []

    @property
    def display_name(self) -> str:
        return self.vendor_label or self.vendor_name

    async def connect(self) -> bool:
        try:
            return await self.client.test_connection()
        except Exception as e:
            logger.error(f"{__name__}:connect - Failed to connect to {self.vendor_name}: {e}")
            return False

    async def disconnect(self) -> bool:
        # Vendors hold no session state on our side
        return True

    async def is_connected(self) -> bool:
        try:
            return await self.client.test_connection()
        except Exception:
            return False

    @abstractmethod
    def steps(self) -> list[tuple[str, str, Callable[[], Awaitable[Any]]]]:
        """
        Ordered (entity label, result key, coroutine factory) triples.
        """

    async def prepare(self) -> None:
        """Hook run once after the connection check, before any step."""

    async def fetch_data(self) -> FetchResult:
        """
        Run every step and aggregate the outcomes.

        Returns:
            FetchResult: success only when no step failed
        """
        try:
            if not await self.is_connected():
                return FetchResult(
                    success=False,
                    message=(
                        f"Not connected to {self.vendor_name}. Please check your "
                        f"{self.not_connected_hint} and try again."
                    ),
                )

            await self.prepare()

            errors: list[str] = []
            results: dict[str, Any] = {}

            for label, key, step in self.steps():
                self._pending_notifications = []
                try:
                    results[key] = await step()
                    await self.db.commit()
                except Exception as e:
                    await self.db.rollback()
                    self._pending_notifications = []
                    reason = describe_error(e)
                    logger.error(
                        f"{__name__}:fetch_data - {self.vendor_name} {label} {self.operation} failed: {reason}"
                    )
                    errors.append(f"{label} {self.operation} failed: {reason}")
                    continue
                await self._send_pending_notifications()

            await self.notifier.create_notification(
                self.user_id,
                "INTEGRATION_STATUS",
                f"{self.vendor_name} Data {self.operation.capitalize()} Completed",
                (
                    f"Successfully {self.operation_past} data {self.preposition} {self.display_name}"
                    if not errors
                    else f"{self.operation_past.capitalize()} data {self.preposition} "
                    f"{self.display_name} with {len(errors)} errors"
                ),
                {"results": _jsonable(results)},
            )

            logger.info(
                f"{__name__}:fetch_data - {self.vendor_name} {self.operation} finished",
                extra={"user_id": self.user_id, "error_count": len(errors)},
            )

            return FetchResult(
                success=not errors,
                message=(
                    f"{self.vendor_name} data {self.operation} completed successfully"
                    if not errors
                    else f"{self.vendor_name} data {self.operation} completed with {len(errors)} errors"
                ),
                data=results,
                errors=errors or None,
            )
        except Exception as e:
            reason = describe_error(e)
            logger.error(f"{__name__}:fetch_data - {self.vendor_name} data {self.operation} failed: {reason}")
            return FetchResult(
                success=False,
                message=f"{self.vendor_name} data {self.operation} failed: {reason}",
                errors=[reason],
            )

    def notify(
        self,
        type: str,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        """
        Queue a notification for the owner of the integration.

        Queued notifications are sent only after the running step has
        committed; a step that rolls back drops them.
        """
        self._pending_notifications.append((type, title, message, data))

    async def _send_pending_notifications(self) -> None:
        pending, self._pending_notifications = self._pending_notifications, []
        for type, title, message, data in pending:
            try:
                await self.notifier.create_notification(self.user_id, type, title, message, data)
            except Exception as e:
                # The step is already committed
                logger.warning(f"{__name__}:notify - Failed to send '{title}' notification: {e}")

    async def sync(self) -> SyncResult:
        """Run fetch_data and report how many records were processed."""
        result = await self.fetch_data()
        return SyncResult(
            success=result.success,
            message=result.message,
            synced_entities=count_synced(result.data),
            errors=result.errors,
        )

    async def process_records(
        self,
        entity: str,
        records: Iterable[dict[str, Any]],
        handler: Callable[[dict[str, Any]], Awaitable[RecordOutcome]],
    ) -> list[RecordOutcome]:
        """
        Apply handler to each record, isolating mapping failures.

        Database errors are not isolated here; they abort the step so the
        session can be rolled back.

        Args:
            entity: Singular entity name used in error outcomes
            records: Raw vendor records
            handler: Maps and persists one record, returns its outcome

        Returns:
            list: One outcome per record
        """
        outcomes: list[RecordOutcome] = []
        for record in records:
            try:
                outcomes.append(await handler(record))
            except SQLAlchemyError:
                raise
            except Exception as e:
                logger.warning(f"{__name__}:process_records - Failed to process {entity}: {e}")
                outcomes.append({"error": f"Failed to process {entity}: {e}"})
        return outcomes


def _jsonable(value: Any) -> Any:
    """Stringify values JSON columns cannot hold (UUIDs, datetimes)."""
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
