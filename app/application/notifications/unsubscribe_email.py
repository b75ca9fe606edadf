"""
Use case: Remove an email subscription.

Input: UnsubscribeEmailCommand (subscription_id)
Output: None
Side effects: Deletes the subscription at the pub/sub provider.
Failure cases: None surfaced; provider errors are logged by the dispatcher.
"""

from app.application.notifications.dtos import UnsubscribeEmailCommand
from app.domain.notifications.dispatcher import NotificationDispatcher


class UnsubscribeEmailUseCase:
    """Best-effort removal of a subscription."""

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    def execute(self, command: UnsubscribeEmailCommand) -> None:
        self._dispatcher.unsubscribe(command.subscription_id)
