"""
Dependency injection for the notifications bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the notifications context.
"""

from app.application.notifications.publish_notification import (
    PublishNotificationUseCase,
)
from app.application.notifications.subscribe_email import SubscribeEmailUseCase
from app.application.notifications.unsubscribe_email import (
    UnsubscribeEmailUseCase,
)
from app.domain.notifications.dispatcher import NotificationDispatcher
from app.infrastructure.notifications.dispatch_config import load_dispatch_config
from app.infrastructure.notifications.sns_gateway import SnsGatewayFactory


def get_dispatcher() -> NotificationDispatcher:
    """Build a NotificationDispatcher backed by SNS."""
    return NotificationDispatcher(
        config_loader=load_dispatch_config,
        gateway_factory=SnsGatewayFactory(),
    )


def get_subscribe_email_use_case() -> SubscribeEmailUseCase:
    """Build SubscribeEmailUseCase with its infrastructure dependencies."""
    return SubscribeEmailUseCase(dispatcher=get_dispatcher())


def get_unsubscribe_email_use_case() -> UnsubscribeEmailUseCase:
    """Build UnsubscribeEmailUseCase with its infrastructure dependencies."""
    return UnsubscribeEmailUseCase(dispatcher=get_dispatcher())


def get_publish_notification_use_case() -> PublishNotificationUseCase:
    """Build PublishNotificationUseCase with its infrastructure dependencies."""
    return PublishNotificationUseCase(dispatcher=get_dispatcher())
