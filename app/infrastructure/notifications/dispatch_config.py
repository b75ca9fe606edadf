"""
Adapter: per-call dispatch configuration.

Turns application settings into the domain DispatchConfig.
resolve_credentials and build_dispatch_config are pure functions of
the settings; load_dispatch_config re-reads the environment each call.
"""

import logging

from app.core.config import Settings, load_settings
from app.domain.notifications.dispatcher import build_filter_policy
from app.domain.notifications.entities import DispatchConfig, ProviderCredentials

logger = logging.getLogger(__name__)


def resolve_credentials(settings: Settings) -> ProviderCredentials:
    """Build provider credentials from settings.

    Access key and secret are only used together. If either is missing,
    all explicit values are dropped and the environment credential chain
    applies.
    """
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        return ProviderCredentials(
            region=settings.aws_region,
            access_key=settings.aws_access_key_id,
            secret_key=settings.aws_secret_access_key,
            session_token=settings.aws_session_token or None,
        )
    return ProviderCredentials(region=settings.aws_region)


def build_dispatch_config(settings: Settings) -> DispatchConfig:
    """Assemble the DispatchConfig for a single dispatcher call."""
    return DispatchConfig(
        topic_arn=settings.sns_topic_arn,
        credentials=resolve_credentials(settings),
        filter_policy=build_filter_policy(settings.sns_filter_categories),
        timeout_seconds=settings.sns_timeout_seconds,
    )


def load_dispatch_config() -> DispatchConfig:
    """Resolve the dispatch configuration from the current environment."""
    config = build_dispatch_config(load_settings())
    logger.debug(
        "Resolved dispatch config: topic=%s region=%s credentials=%s",
        config.topic_arn,
        config.credentials.region,
        config.credentials.source,
    )
    return config
