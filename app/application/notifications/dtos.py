"""
Data Transfer Objects for the notifications application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.notifications.entities import DEFAULT_CATEGORY


@dataclass(frozen=True)
class SubscribeEmailCommand:
    """Input DTO for subscribing an email address to broadcasts.

    Attributes:
        email: Address to subscribe.
    """

    email: str


@dataclass(frozen=True)
class SubscribeEmailResult:
    """Output DTO for a subscription request.

    Attributes:
        subscription_id: Provider identifier, or "pending confirmation".
        pending_confirmation: True until the subscriber confirms by email.
    """

    subscription_id: str
    pending_confirmation: bool


@dataclass(frozen=True)
class UnsubscribeEmailCommand:
    """Input DTO for removing a subscription."""

    subscription_id: Optional[str]


@dataclass(frozen=True)
class PublishNotificationCommand:
    """Input DTO for a topic-wide broadcast.

    Attributes:
        message: Message body.
        subject: Email subject line.
        category: Category attribute used for subscriber filtering.
    """

    message: str
    subject: str
    category: str = DEFAULT_CATEGORY
