"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
They are raised by adapters and converted into result values by
RegistrationService; none of them escape the service boundary.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class EmailAlreadyInUse(RegistrationError):
    """An account with this email already exists (unique constraint)."""

    pass


class NotificationFailed(RegistrationError):
    """The activation email was rejected, timed out, or could not be sent."""

    pass
