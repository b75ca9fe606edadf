"""
Adapter: AWS SNS gateway.

Implements the PubSubGateway and PubSubGatewayFactory ports with boto3.
A new client is built for every dispatcher call and closed afterwards.
botocore retries are disabled; callers own their retry policy.
"""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.domain.notifications.entities import (
    ProviderCredentials,
    ProviderErrorDetails,
)
from app.domain.notifications.errors import ProviderError
from app.domain.notifications.ports import PubSubGateway, PubSubGatewayFactory

logger = logging.getLogger(__name__)


def _details_from_client_error(exc: ClientError) -> ProviderErrorDetails:
    """Extract code, HTTP status and request id from a botocore ClientError."""
    response = exc.response or {}
    error = response.get("Error", {})
    metadata = response.get("ResponseMetadata", {})
    return ProviderErrorDetails(
        message=error.get("Message") or str(exc),
        code=error.get("Code"),
        status_code=metadata.get("HTTPStatusCode"),
        request_id=metadata.get("RequestId"),
    )


def _translate(exc: Exception) -> ProviderError:
    if isinstance(exc, ClientError):
        return ProviderError(_details_from_client_error(exc))
    return ProviderError(ProviderErrorDetails(message=str(exc)))


class SnsGateway(PubSubGateway):
    """SNS implementation of the pub/sub gateway.

    Args:
        client: A boto3 SNS client. The gateway owns it and closes it.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    def subscribe(
        self,
        topic_arn: str,
        protocol: str,
        endpoint: str,
        attributes: Optional[dict[str, str]] = None,
    ) -> Optional[str]:
        params: dict[str, Any] = {
            "TopicArn": topic_arn,
            "Protocol": protocol,
            "Endpoint": endpoint,
        }
        if attributes:
            params["Attributes"] = attributes
        try:
            response = self._client.subscribe(**params)
        except (ClientError, BotoCoreError) as exc:
            raise _translate(exc) from exc
        return response.get("SubscriptionArn")

    def unsubscribe(self, subscription_id: str) -> None:
        try:
            self._client.unsubscribe(SubscriptionArn=subscription_id)
        except (ClientError, BotoCoreError) as exc:
            raise _translate(exc) from exc

    def publish(
        self,
        topic_arn: str,
        message: str,
        subject: str,
        message_attributes: dict[str, dict[str, str]],
    ) -> Optional[str]:
        try:
            response = self._client.publish(
                TopicArn=topic_arn,
                Message=message,
                Subject=subject,
                MessageAttributes=message_attributes,
            )
        except (ClientError, BotoCoreError) as exc:
            raise _translate(exc) from exc
        return response.get("MessageId")

    def close(self) -> None:
        self._client.close()


class SnsGatewayFactory(PubSubGatewayFactory):
    """Builds an SnsGateway from explicit or environment credentials."""

    def create(
        self,
        credentials: ProviderCredentials,
        timeout: Optional[float] = None,
    ) -> SnsGateway:
        if credentials.is_explicit:
            session = boto3.session.Session(
                aws_access_key_id=credentials.access_key,
                aws_secret_access_key=credentials.secret_key,
                aws_session_token=credentials.session_token,
                region_name=credentials.region,
            )
        else:
            session = boto3.session.Session(region_name=credentials.region)
        logger.debug("Creating SNS client with %s credentials", credentials.source)

        config_kwargs: dict[str, Any] = {
            "retries": {"total_max_attempts": 1, "mode": "standard"},
        }
        if timeout is not None:
            config_kwargs["connect_timeout"] = timeout
            config_kwargs["read_timeout"] = timeout

        client = session.client("sns", config=Config(**config_kwargs))
        return SnsGateway(client)
