"""
Third-party integration layer.

Exports:
  - IntegrationCategory, FetchResult, SyncResult: Shared result types
  - IntegrationService: Abstract adapter with the common fetch template
  - IntegrationServiceFactory: (category, service) -> adapter registry
"""

from scm_backend.core.integration.base import (
    FetchResult,
    IntegrationCategory,
    IntegrationService,
    Notifier,
    SyncResult,
    count_synced,
)
from scm_backend.core.integration.factory import IntegrationServiceFactory

__all__ = [
    "IntegrationCategory",
    "FetchResult",
    "SyncResult",
    "Notifier",
    "IntegrationService",
    "IntegrationServiceFactory",
    "count_synced",
]
