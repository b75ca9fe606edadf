"""
Use case: Subscribe an email address to trade notifications.

Input: SubscribeEmailCommand (email)
Output: SubscribeEmailResult
Side effects: Creates a subscription at the pub/sub provider.
Failure cases: InvalidArgumentError, DispatchFailureError.
"""

from app.application.notifications.dtos import (
    SubscribeEmailCommand,
    SubscribeEmailResult,
)
from app.domain.notifications.dispatcher import NotificationDispatcher


class SubscribeEmailUseCase:
    """Orchestrates an email subscription through the dispatcher."""

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    def execute(self, command: SubscribeEmailCommand) -> SubscribeEmailResult:
        """Run the subscription use case.

        Args:
            command: The subscription request.

        Returns:
            The subscription identifier and whether confirmation is pending.
        """
        handle = self._dispatcher.subscribe(command.email)
        return SubscribeEmailResult(
            subscription_id=handle.subscription_id,
            pending_confirmation=handle.is_pending,
        )
