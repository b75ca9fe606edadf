"""
Domain-specific errors for the notifications bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Optional

from app.domain.notifications.entities import ProviderErrorDetails


class NotificationDomainError(Exception):
    """Base error for all notification domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(NotificationDomainError, ValueError):
    """Raised when an input is missing or malformed, before any network call."""

    def __init__(self, message: str, field: str = "email") -> None:
        super().__init__(message)
        self.field = field


class ProviderError(NotificationDomainError):
    """Raised by pub/sub gateways when the provider rejects a call."""

    def __init__(self, details: ProviderErrorDetails) -> None:
        super().__init__(details.message)
        self.details = details


class DispatchFailureError(NotificationDomainError):
    """Raised when a subscribe or publish call fails at the provider.

    Carries the provider diagnostics as structured data so callers
    (and tests) can inspect code, status and request id directly.
    """

    def __init__(
        self,
        operation: str,
        details: Optional[ProviderErrorDetails] = None,
    ) -> None:
        reason = details.message if details else "unknown error"
        super().__init__(f"Failed to {operation}: {reason}")
        self.operation = operation
        self.details = details
