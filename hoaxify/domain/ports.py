"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from contextlib import AbstractContextManager
from typing import Protocol

from .models import Account, NewAccount


class UserStoreTransaction(Protocol):
    """Write handle valid only inside UserStore.transaction()."""

    def create_account(self, account: NewAccount) -> Account:
        """
        Insert a new account row inside the open transaction.

        The row is invisible to other readers until the transaction commits.

        Args:
            account: Account to insert (always inactive)

        Returns:
            The stored Account with its identity and creation timestamp

        Raises:
            EmailAlreadyInUse: If the email unique constraint is violated
        """
        ...


class UserStore(Protocol):
    """Port interface for account persistence."""

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up a committed account by email.

        Args:
            email: Email address exactly as submitted

        Returns:
            The Account, or None if no account uses this email
        """
        ...

    def transaction(self) -> AbstractContextManager[UserStoreTransaction]:
        """
        Open a storage transaction.

        Commits when the block exits normally and rolls back when it exits
        with an exception, on every exit path.
        """
        ...


class Notifier(Protocol):
    """Port interface for activation email delivery."""

    def send_account_activation(self, email: str, token: str) -> None:
        """
        Send the activation token to an email address.

        Args:
            email: Recipient email address
            token: Activation token of the new account

        Raises:
            NotificationFailed: If the channel rejects, times out, or errors
        """
        ...


class MessageLocalizer(Protocol):
    """Port interface for turning message codes into display text."""

    def translate(self, code: str, locale: str | None = None) -> str:
        """
        Resolve a message code for a locale.

        Args:
            code: Validation or message code (e.g. "email_inuse")
            locale: Requested locale identifier; unknown values fall back

        Returns:
            Display text
        """
        ...
