"""
Console welcome notifier - Success callback for registered users.

Logs each newly registered user for demo purposes; it is the success
callback the web app hands to SubmissionController.
"""

import logging

from src.domain.models import RegisteredUser

logger = logging.getLogger(__name__)


class ConsoleWelcomeNotifier:
    """
    Implements SuccessCallback via console logging.

    Instances are callables so they can be passed directly as `on_success`.
    """

    def __call__(self, user: RegisteredUser) -> None:
        """
        Log the registered user at INFO level.

        Only identifying fields are logged; the password never reaches this
        callback.

        Args:
            user: User returned by the registration endpoint
        """
        logger.info(
            "[REGISTERED] Id: %s Email: %s Name: %s %s",
            user.id,
            user.email,
            user.first_name,
            user.last_name,
        )
