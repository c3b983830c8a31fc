"""
Registration domain service - Persist-then-notify-or-rollback.

This module contains the core business logic for user registration.

Registration Protocol
=====================

1. Validate the request (field rules + email uniqueness lookup).
   Errors -> VALIDATION_FAILED, nothing written.
2. Hash the password (bcrypt) and generate the activation token.
3. Open one storage transaction and insert the account (inactive).
4. Send the activation email while the transaction is still open.
5. Email failure -> transaction rolls back -> EMAIL_FAILURE.
6. Email accepted -> transaction commits -> SUCCESS.

An account is visible to other readers iff its activation email was
accepted by the notifier. The uniqueness lookup in step 1 and the insert
in step 3 run in different transactions; a concurrent duplicate that slips
between them is caught by the storage unique constraint and reported the
same way as the lookup (email_inuse).
"""

import logging
from dataclasses import dataclass

from .credentials import generate_token, hash_password
from .exceptions import EmailAlreadyInUse, NotificationFailed
from .models import (
    Account,
    NewAccount,
    RegistrationOutcome,
    RegistrationRequest,
    RegistrationResult,
    ValidationErrorSet,
)
from .ports import MessageLocalizer, Notifier, UserStore
from .validation import validate

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates validation, password hashing, token generation and the
    transactional account insert gated on activation email delivery.
    All collaborators are injected; the service holds no other state.
    """

    store: UserStore
    notifier: Notifier
    localizer: MessageLocalizer
    bcrypt_cost: int = 10
    token_length: int = 16

    def register(self, request: RegistrationRequest, locale: str | None = None) -> RegistrationResult:
        """
        Register a new inactive account and send its activation email.

        Args:
            request: Raw signup data
            locale: Locale for the result's display text

        Returns:
            RegistrationResult with outcome SUCCESS, VALIDATION_FAILED or
            EMAIL_FAILURE

        Raises:
            Any unexpected storage error. Expected failures never raise.
        """
        errors = self.validate(request)
        if errors:
            return self._validation_failed(errors, locale)

        new_account = NewAccount(
            username=request.username,
            email=request.email,
            password_hash=hash_password(request.password, rounds=self.bcrypt_cost),
            activation_token=generate_token(self.token_length),
        )

        try:
            with self.store.transaction() as tx:
                account = tx.create_account(new_account)
                self._send_activation(account)
        except EmailAlreadyInUse:
            logger.info("Email claimed concurrently, insert rejected: %s", redact_email(new_account.email))
            return self._validation_failed({"email": "email_inuse"}, locale)
        except NotificationFailed as e:
            logger.warning(
                "Activation email failed for %s, account rolled back: %s",
                redact_email(new_account.email),
                e,
            )
            return self._result(RegistrationOutcome.EMAIL_FAILURE, "email_failure", locale)

        logger.info("User created: %s", redact_email(account.email))
        return self._result(RegistrationOutcome.SUCCESS, "user_created_success", locale)

    def validate(self, request: RegistrationRequest) -> ValidationErrorSet:
        """Run field validation, using the store for the uniqueness check."""
        return validate(request, self._email_in_use)

    def _email_in_use(self, email: str) -> bool:
        return self.store.find_by_email(email) is not None

    def _send_activation(self, account: Account) -> None:
        """
        Send the activation email, normalizing every failure to NotificationFailed.

        Must run inside the open transaction so a failure rolls the insert back.
        """
        try:
            self.notifier.send_account_activation(account.email, account.activation_token)
        except NotificationFailed:
            raise
        except Exception as e:
            raise NotificationFailed(f"Unexpected notifier error: {e}") from e

    def _validation_failed(self, errors: ValidationErrorSet, locale: str | None) -> RegistrationResult:
        return RegistrationResult(
            outcome=RegistrationOutcome.VALIDATION_FAILED,
            error_codes=dict(errors),
            validation_errors={
                field_name: self.localizer.translate(code, locale) for field_name, code in errors.items()
            },
        )

    def _result(self, outcome: RegistrationOutcome, code: str, locale: str | None) -> RegistrationResult:
        return RegistrationResult(
            outcome=outcome,
            message_code=code,
            message=self.localizer.translate(code, locale),
        )


def redact_email(email: str) -> str:
    """
    Mask the local part of an email for logging.

    "user1@email.com" -> "u***1@email.com"
    """
    local, sep, domain = email.partition("@")
    if not sep:
        return "<redacted>"
    if len(local) <= 2:
        return f"{local[:1]}*@{domain}"
    return f"{local[0]}{'*' * (len(local) - 2)}{local[-1]}@{domain}"
