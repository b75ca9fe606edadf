"""
Pydantic schemas for notification API request/response validation.

These schemas define the API contract. Email format is validated by the
domain layer so malformed addresses map to the same error everywhere.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

from app.domain.notifications.entities import DEFAULT_CATEGORY

EMAIL_MAX_LEN = 254
SUBJECT_MAX_LEN = 100
CATEGORY_PATTERN = r"^[a-z][a-z0-9_-]*$"


class SubscribeRequest(BaseModel):
    """Request schema for the subscribe endpoint.

    Attributes:
        email: Address to receive broadcast notifications.
    """

    email: str = Field(
        ..., max_length=EMAIL_MAX_LEN, description="Subscriber email address"
    )


class SubscribeResponse(BaseModel):
    """Response schema for the subscribe endpoint."""

    subscription_id: str
    pending_confirmation: bool


class UnsubscribeRequest(BaseModel):
    """Request schema for the unsubscribe endpoint.

    Attributes:
        subscription_id: Identifier returned by subscribe. Empty values
            and "pending confirmation" are accepted and ignored.
    """

    subscription_id: str | None = Field(
        default=None, description="Subscription identifier returned by subscribe"
    )


class UnsubscribeResponse(BaseModel):
    """Response schema for the unsubscribe endpoint."""

    status: str = "unsubscribed"


class PublishRequest(BaseModel):
    """Request schema for the publish endpoint.

    Attributes:
        message: Notification body.
        subject: Email subject line (SNS limits it to 100 characters).
        category: Category attribute used for subscriber filtering.
    """

    message: str = Field(..., min_length=1, description="Notification body")
    subject: str = Field(
        ..., min_length=1, max_length=SUBJECT_MAX_LEN, description="Email subject"
    )
    category: str = Field(
        default=DEFAULT_CATEGORY,
        max_length=64,
        pattern=CATEGORY_PATTERN,
        description="Notification category, e.g. trade, alert, test, general",
    )


class PublishResponse(BaseModel):
    """Response schema for the publish endpoint."""

    status: str = "published"


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
