"""
Domain models - Plain data carried between the service and its ports.

Frozen dataclasses keep the domain free of framework imports. The API
layer maps its pydantic models onto RegistrationRequest.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RegistrationOutcome(Enum):
    """
    Result kind of RegistrationService.register().

    Expected failures are reported through these values instead of
    exceptions; only unexpected storage faults propagate.
    """

    SUCCESS = "success"
    VALIDATION_FAILED = "validation_failed"
    EMAIL_FAILURE = "email_failure"


# Field name -> error code, in declaration order (username, email, password)
ValidationErrorSet = dict[str, str]


@dataclass(frozen=True)
class RegistrationRequest:
    """Raw signup data. Any field may be missing."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class NewAccount:
    """Account row about to be inserted. Always created inactive."""

    username: str
    email: str
    password_hash: str
    activation_token: str
    inactive: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Account:
    """Persisted account row."""

    id: int
    username: str
    email: str
    password_hash: str
    activation_token: str
    inactive: bool
    created_at: datetime


@dataclass(frozen=True)
class RegistrationResult:
    """
    Outcome of a registration attempt.

    Codes are kept alongside the localized text so callers can branch on
    codes while the presentation layer only renders text.
    """

    outcome: RegistrationOutcome
    message_code: str | None = None
    message: str | None = None
    error_codes: ValidationErrorSet = field(default_factory=dict)
    validation_errors: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.outcome is RegistrationOutcome.SUCCESS
