"""
Use case: Broadcast a notification to all confirmed subscribers.

Input: PublishNotificationCommand (message, subject, category)
Output: None
Side effects: Publishes one message to the configured topic.
Failure cases: DispatchFailureError. Not retried.
"""

import logging

from app.application.notifications.dtos import PublishNotificationCommand
from app.domain.notifications.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class PublishNotificationUseCase:
    """Orchestrates a topic-wide broadcast through the dispatcher."""

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    def execute(self, command: PublishNotificationCommand) -> None:
        """Run the publish use case.

        Args:
            command: Message body, subject and category.
        """
        logger.info("Broadcasting %s notification", command.category)
        self._dispatcher.publish(
            body=command.message,
            subject=command.subject,
            category=command.category,
        )
