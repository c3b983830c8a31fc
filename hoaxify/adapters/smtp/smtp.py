"""
SMTP notifier adapter - Implements Notifier protocol.

Sends the account activation email through an SMTP relay. The whole
exchange (connect, EHLO, MAIL, RCPT, DATA, QUIT) shares one deadline, so a
relay that answers every command slowly still cannot hold the registration
transaction open longer than the configured timeout. Every transport failure
(connection refused, timeout, recipient or message rejected) surfaces as the
domain's NotificationFailed so the registration transaction can roll back.
"""

import logging
import smtplib
import time
from email.message import EmailMessage

from hoaxify.domain.exceptions import NotificationFailed

logger = logging.getLogger(__name__)

ACTIVATION_SUBJECT = "Account Activation"


class DeadlineSMTP(smtplib.SMTP):
    """
    smtplib client whose socket operations all draw from one time budget.

    Before every command write and every reply read the socket timeout is
    set to what is left of the budget. Once it is spent, TimeoutError is
    raised without touching the socket.
    """

    def __init__(self, host: str = "", port: int = 0, local_hostname: str | None = None, *, timeout: float) -> None:
        self.deadline = time.monotonic() + timeout
        super().__init__(host, port, local_hostname, timeout=timeout)

    def remaining(self) -> float:
        left = self.deadline - time.monotonic()
        if left <= 0:
            raise TimeoutError("SMTP delivery deadline exceeded")
        return left

    def send(self, s):
        if self.sock:
            self.sock.settimeout(self.remaining())
        super().send(s)

    def getreply(self):
        if self.sock:
            self.sock.settimeout(self.remaining())
        return super().getreply()


class SmtpNotifier:
    """
    Implements Notifier protocol via smtplib.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Opens one SMTP connection per message; holds no connection between calls.
    """

    def __init__(self, host: str, port: int, sender: str, timeout: float = 10.0) -> None:
        """
        Args:
            host: SMTP relay host
            port: SMTP relay port
            sender: From header, e.g. "My App <info@my-app.com>"
            timeout: Overall delivery deadline in seconds, connect included
        """
        self.host = host
        self.port = port
        self.sender = sender
        self.timeout = timeout

    def build_message(self, email: str, token: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = email
        message["Subject"] = ACTIVATION_SUBJECT
        message.set_content(f"Token is {token}")
        message.add_alternative(f"Token is {token}", subtype="html")
        return message

    def send_account_activation(self, email: str, token: str) -> None:
        """
        Send the activation email.

        Args:
            email: Recipient email address
            token: Activation token of the new account

        Raises:
            NotificationFailed: On any SMTP or network error, including the
                deadline running out
        """
        message = self.build_message(email, token)
        try:
            with DeadlineSMTP(self.host, self.port, timeout=self.timeout) as client:
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailed(f"SMTP delivery to {self.host}:{self.port} failed: {e}") from e
        logger.info("Activation email accepted by %s:%s", self.host, self.port)
