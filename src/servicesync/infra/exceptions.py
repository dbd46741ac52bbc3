"""
Custom exceptions for servicesync operations.

This module provides the exception classes raised while reconciling
individual service files against the legacy services document.
"""


class ServiceSyncError(Exception):
    """Base exception for all servicesync errors."""

    pass


class LegacyLoadError(ServiceSyncError):
    """Raised when the legacy services document cannot be read or parsed."""

    pass


class MissingServiceRecordError(ServiceSyncError):
    """Raised when a missing service key has no matching legacy record."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No legacy record found for service '{key}'")
        self.key = key


class ServiceWriteError(ServiceSyncError):
    """Raised when a service record cannot be written to its individual file."""

    pass
