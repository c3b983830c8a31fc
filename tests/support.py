"""
Test doubles and request builders shared across test packages.
"""

import threading

from hoaxify.domain.exceptions import NotificationFailed
from hoaxify.domain.models import RegistrationRequest

# Lowest bcrypt cost keeps the suite fast; cost factor itself is tested separately
FAST_BCRYPT_COST = 4


class RecordingNotifier:
    """Notifier that accepts every message and remembers it."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def send_account_activation(self, email: str, token: str) -> None:
        with self._lock:
            self.sent.append((email, token))


class FailingNotifier:
    """Notifier whose channel always rejects."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or NotificationFailed("SMTP 553 mailbox rejected")
        self.attempts = 0

    def send_account_activation(self, email: str, token: str) -> None:
        self.attempts += 1
        raise self.error


def valid_request(**overrides: str | None) -> RegistrationRequest:
    """The canonical valid signup, with optional field overrides."""
    fields = {"username": "user1", "email": "user1@email.com", "password": "P4ssword"}
    fields.update(overrides)
    return RegistrationRequest(**fields)
