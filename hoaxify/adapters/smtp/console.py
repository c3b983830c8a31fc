"""
Console notifier adapter - Implements Notifier protocol.

Development stand-in for the SMTP relay: the activation token is written
to the log so a developer can activate accounts locally. The recipient
address is masked the same way as in the registration service logs.
"""

import logging

from hoaxify.domain.registration import redact_email

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """Notifier that logs activation tokens instead of sending mail. Never fails."""

    def send_account_activation(self, email: str, token: str) -> None:
        logger.info("[ACTIVATION] Recipient: %s Token: %s", redact_email(email), token)
