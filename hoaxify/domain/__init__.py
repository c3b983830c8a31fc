"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user registration:
field validation, credential helpers, and the transactional
persist-then-notify-or-rollback service. It defines its own port
interfaces for infrastructure abstraction.
"""

from .exceptions import EmailAlreadyInUse, NotificationFailed, RegistrationError
from .models import (
    Account,
    NewAccount,
    RegistrationOutcome,
    RegistrationRequest,
    RegistrationResult,
    ValidationErrorSet,
)
from .ports import MessageLocalizer, Notifier, UserStore, UserStoreTransaction
from .registration import RegistrationService, redact_email

__all__ = [
    "Account",
    "EmailAlreadyInUse",
    "MessageLocalizer",
    "NewAccount",
    "NotificationFailed",
    "Notifier",
    "RegistrationError",
    "RegistrationOutcome",
    "RegistrationRequest",
    "RegistrationResult",
    "RegistrationService",
    "UserStore",
    "UserStoreTransaction",
    "ValidationErrorSet",
    "redact_email",
]
