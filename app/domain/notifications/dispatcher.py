"""
Email notification dispatcher.

Registers email addresses with a pub/sub topic, fans broadcast messages
out to every confirmed subscriber, and removes subscriptions.

Architecture:
    Use cases  ──▶  NotificationDispatcher  ──▶  PubSubGatewayFactory
                          │                          │
                    config_loader()            PubSubGateway (per call)

Configuration (topic, credentials, filter policy, deadline) is resolved
on every call, so a change takes effect without a restart. One gateway
is opened per call and closed on every exit path. Nothing is retried.

Usage:
    dispatcher = NotificationDispatcher(load_dispatch_config, SnsGatewayFactory())
    handle = dispatcher.subscribe("trader@example.com")
    dispatcher.publish("AAPL filled at 187.20", "Trade executed", category="trade")
    dispatcher.unsubscribe(handle.subscription_id)
"""

import json
import logging
from typing import Callable, Iterable, Optional

from app.domain.notifications.email_validator import is_valid_email, mask_email
from app.domain.notifications.entities import (
    CATEGORY_ATTRIBUTE,
    DEFAULT_CATEGORY,
    EMAIL_PROTOCOL,
    PENDING_CONFIRMATION,
    BroadcastMessage,
    DispatchConfig,
    ProviderErrorDetails,
    SubscriptionHandle,
    SubscriptionRequest,
)
from app.domain.notifications.errors import (
    DispatchFailureError,
    InvalidArgumentError,
    ProviderError,
)
from app.domain.notifications.ports import PubSubGatewayFactory

logger = logging.getLogger(__name__)

ConfigLoader = Callable[[], DispatchConfig]


def build_filter_policy(categories: Iterable[str]) -> Optional[str]:
    """Build a subscription filter policy restricting delivery to categories.

    Returns:
        A JSON filter policy, or None when no categories are given.
    """
    wanted = [c for c in categories if c]
    if not wanted:
        return None
    return json.dumps({CATEGORY_ATTRIBUTE: wanted})


def _log_provider_error(operation: str, details: ProviderErrorDetails) -> None:
    logger.error(
        "Provider error during %s: %s (code=%s, status=%s, request_id=%s)",
        operation,
        details.message,
        details.code,
        details.status_code,
        details.request_id,
    )


class NotificationDispatcher:
    """Subscribe, unsubscribe and broadcast through a pub/sub topic.

    Args:
        config_loader: Called once per operation to resolve the topic,
            credentials, filter policy and default deadline.
        gateway_factory: Builds a scoped provider gateway per call.
    """

    def __init__(
        self,
        config_loader: ConfigLoader,
        gateway_factory: PubSubGatewayFactory,
    ) -> None:
        self._config_loader = config_loader
        self._gateway_factory = gateway_factory

    # ------------------------------------------------------------------
    # Subscribe
    # ------------------------------------------------------------------

    def subscribe(
        self, email_address: Optional[str], timeout: Optional[float] = None
    ) -> SubscriptionHandle:
        """Register an email address with the configured topic.

        Args:
            email_address: Address to subscribe.
            timeout: Optional deadline in seconds for the provider call.

        Returns:
            The provider subscription handle, or the pending-confirmation
            sentinel when the subscriber still has to confirm.

        Raises:
            InvalidArgumentError: The address is empty or malformed.
            DispatchFailureError: The provider call failed.
        """
        if not email_address:
            raise InvalidArgumentError("Email cannot be empty")
        if not is_valid_email(email_address):
            raise InvalidArgumentError("Invalid email format")

        request = SubscriptionRequest(email_address=email_address)
        masked = mask_email(request.email_address)
        logger.info("Subscribing email %s", masked)

        try:
            config = self._load_config("subscribe email")
            attributes = (
                {"FilterPolicy": config.filter_policy}
                if config.filter_policy
                else None
            )
            with self._open_gateway(config, timeout) as gateway:
                subscription_id = gateway.subscribe(
                    topic_arn=config.topic_arn,
                    protocol=EMAIL_PROTOCOL,
                    endpoint=request.email_address,
                    attributes=attributes,
                )
        except DispatchFailureError:
            raise
        except ProviderError as exc:
            _log_provider_error("subscribe", exc.details)
            raise DispatchFailureError("subscribe email", exc.details) from exc
        except Exception as exc:
            logger.exception("Unexpected error subscribing %s", masked)
            raise DispatchFailureError(
                "subscribe email", ProviderErrorDetails(message=str(exc))
            ) from exc

        handle = SubscriptionHandle.from_provider(subscription_id)
        logger.info(
            "Subscribed email %s (subscription=%s)", masked, handle.subscription_id
        )
        return handle

    # ------------------------------------------------------------------
    # Unsubscribe
    # ------------------------------------------------------------------

    def unsubscribe(
        self, subscription_id: Optional[str], timeout: Optional[float] = None
    ) -> None:
        """Remove a subscription. Best effort: failures are logged, not raised.

        Empty identifiers and the pending-confirmation sentinel are a
        no-op since the provider never created a concrete subscription.
        """
        if not subscription_id or subscription_id == PENDING_CONFIRMATION:
            logger.debug("Nothing to unsubscribe")
            return

        try:
            config = self._config_loader()
            with self._open_gateway(config, timeout) as gateway:
                gateway.unsubscribe(subscription_id)
            logger.info("Unsubscribed subscription %s", subscription_id)
        except ProviderError as exc:
            _log_provider_error("unsubscribe", exc.details)
        except Exception as exc:
            logger.error("Error unsubscribing %s: %s", subscription_id, exc)

    # ------------------------------------------------------------------
    # Publish
    # ------------------------------------------------------------------

    def publish(
        self,
        body: str,
        subject: str,
        category: str = DEFAULT_CATEGORY,
        timeout: Optional[float] = None,
    ) -> None:
        """Broadcast a message to every confirmed subscriber of the topic.

        Args:
            body: Message text.
            subject: Email subject line.
            category: Attached as the notificationType attribute so
                subscribers can filter on it.
            timeout: Optional deadline in seconds for the provider call.

        Raises:
            DispatchFailureError: The provider call failed.
        """
        message = BroadcastMessage(
            body=body, subject=subject, category=category or DEFAULT_CATEGORY
        )

        try:
            config = self._load_config("send notification")
            with self._open_gateway(config, timeout) as gateway:
                message_id = gateway.publish(
                    topic_arn=config.topic_arn,
                    message=message.body,
                    subject=message.subject,
                    message_attributes=message.message_attributes(),
                )
        except DispatchFailureError:
            raise
        except ProviderError as exc:
            _log_provider_error("publish", exc.details)
            raise DispatchFailureError("send notification", exc.details) from exc
        except Exception as exc:
            logger.exception("Unexpected error publishing notification")
            raise DispatchFailureError(
                "send notification", ProviderErrorDetails(message=str(exc))
            ) from exc

        logger.info(
            "Published %s notification to %s (message_id=%s)",
            message.category,
            config.topic_arn,
            message_id,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_config(self, operation: str) -> DispatchConfig:
        config = self._config_loader()
        if not config.topic_arn:
            logger.error("Cannot %s: no topic configured", operation)
            raise DispatchFailureError(
                operation, ProviderErrorDetails(message="topic is not configured")
            )
        return config

    def _open_gateway(self, config: DispatchConfig, timeout: Optional[float]):
        effective = timeout if timeout is not None else config.timeout_seconds
        logger.debug("Using %s credentials", config.credentials.source)
        return self._gateway_factory.create(config.credentials, timeout=effective)
