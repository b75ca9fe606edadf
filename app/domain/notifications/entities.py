"""
Domain entities for the notifications bounded context.

All entities are created per call and discarded when the call returns.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

PENDING_CONFIRMATION = "pending confirmation"
DEFAULT_CATEGORY = "general"
EMAIL_PROTOCOL = "email"
CATEGORY_ATTRIBUTE = "notificationType"


class SubscriptionState(Enum):
    """Lifecycle of a single subscription as observed by the dispatcher."""

    UNSUBSCRIBED = "unsubscribed"
    PENDING_CONFIRMATION = "pending_confirmation"
    ACTIVE = "active"


@dataclass(frozen=True)
class SubscriptionRequest:
    """An email address asking to receive topic broadcasts."""

    email_address: str


@dataclass(frozen=True)
class SubscriptionHandle:
    """Provider-issued subscription identifier, or the pending sentinel.

    The caller keeps the handle and passes it back unchanged to
    unsubscribe.
    """

    subscription_id: str

    @classmethod
    def from_provider(cls, subscription_id: Optional[str]) -> "SubscriptionHandle":
        """Build a handle from whatever the provider returned."""
        if not subscription_id:
            return cls(subscription_id=PENDING_CONFIRMATION)
        return cls(subscription_id=subscription_id)

    @property
    def is_pending(self) -> bool:
        return self.subscription_id == PENDING_CONFIRMATION

    @property
    def state(self) -> SubscriptionState:
        if self.is_pending:
            return SubscriptionState.PENDING_CONFIRMATION
        return SubscriptionState.ACTIVE


@dataclass(frozen=True)
class BroadcastMessage:
    """A message fanned out to every confirmed subscriber of the topic."""

    body: str
    subject: str
    category: str = DEFAULT_CATEGORY

    def message_attributes(self) -> dict[str, dict[str, str]]:
        """Typed message attributes used for subscriber-side filtering."""
        return {
            CATEGORY_ATTRIBUTE: {
                "DataType": "String",
                "StringValue": self.category or DEFAULT_CATEGORY,
            }
        }


@dataclass(frozen=True)
class ProviderCredentials:
    """Credentials and region used to reach the pub/sub provider.

    When access_key or secret_key is missing, the provider SDK falls back
    to the credentials supplied by the execution environment.
    """

    region: str
    access_key: Optional[str] = None
    secret_key: Optional[str] = field(default=None, repr=False)
    session_token: Optional[str] = field(default=None, repr=False)

    @property
    def is_explicit(self) -> bool:
        return bool(self.access_key) and bool(self.secret_key)

    @property
    def source(self) -> str:
        """Which credential flavour will be used: session, basic or environment."""
        if not self.is_explicit:
            return "environment"
        if self.session_token:
            return "session"
        return "basic"


@dataclass(frozen=True)
class DispatchConfig:
    """Everything the dispatcher needs for one call, resolved at call time."""

    topic_arn: str
    credentials: ProviderCredentials
    filter_policy: Optional[str] = None
    timeout_seconds: Optional[float] = None


@dataclass(frozen=True)
class ProviderErrorDetails:
    """Diagnostic fields exposed by the provider for a failed call."""

    message: str
    code: Optional[str] = None
    status_code: Optional[int] = None
    request_id: Optional[str] = None
