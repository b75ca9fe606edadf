"""
FastAPI router for the notifications bounded context.

All routes delegate to use cases. No business logic here.
Request shape is validated by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, status

from app.application.notifications.dtos import (
    PublishNotificationCommand,
    SubscribeEmailCommand,
    UnsubscribeEmailCommand,
)
from app.application.notifications.publish_notification import (
    PublishNotificationUseCase,
)
from app.application.notifications.subscribe_email import SubscribeEmailUseCase
from app.application.notifications.unsubscribe_email import (
    UnsubscribeEmailUseCase,
)
from app.core.config import settings
from app.interfaces.notifications.dependencies import (
    get_publish_notification_use_case,
    get_subscribe_email_use_case,
    get_unsubscribe_email_use_case,
)
from app.interfaces.notifications.schemas import (
    ErrorResponse,
    PublishRequest,
    PublishResponse,
    SubscribeRequest,
    SubscribeResponse,
    UnsubscribeRequest,
    UnsubscribeResponse,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post(
    "/subscriptions",
    response_model=SubscribeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    summary="Subscribe an email address",
    description=(
        "Subscribe an email address to trade notifications. The subscriber "
        "usually has to confirm through a link sent by the provider."
    ),
)
@limiter.limit(settings.rate_limit_subscribe)
def subscribe_email(
    request: Request,
    payload: SubscribeRequest,
    use_case: SubscribeEmailUseCase = Depends(get_subscribe_email_use_case),
) -> SubscribeResponse:
    """Subscribe an email address to broadcast notifications."""
    result = use_case.execute(SubscribeEmailCommand(email=payload.email))
    return SubscribeResponse(
        subscription_id=result.subscription_id,
        pending_confirmation=result.pending_confirmation,
    )


@router.post(
    "/unsubscribe",
    response_model=UnsubscribeResponse,
    summary="Remove a subscription",
    description="Best-effort removal of a subscription. Never fails on provider errors.",
)
def unsubscribe_email(
    payload: UnsubscribeRequest,
    use_case: UnsubscribeEmailUseCase = Depends(get_unsubscribe_email_use_case),
) -> UnsubscribeResponse:
    """Remove a subscription by its identifier."""
    use_case.execute(UnsubscribeEmailCommand(subscription_id=payload.subscription_id))
    return UnsubscribeResponse()


@router.post(
    "/publish",
    response_model=PublishResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    summary="Broadcast a notification",
    description="Publish a categorised message to every confirmed subscriber.",
)
@limiter.limit(settings.rate_limit_publish)
def publish_notification(
    request: Request,
    payload: PublishRequest,
    use_case: PublishNotificationUseCase = Depends(get_publish_notification_use_case),
) -> PublishResponse:
    """Broadcast a message to all subscribers of the topic."""
    use_case.execute(
        PublishNotificationCommand(
            message=payload.message,
            subject=payload.subject,
            category=payload.category,
        )
    )
    return PublishResponse()
