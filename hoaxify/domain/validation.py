"""
Registration field validation.

Each field owns a short ordered list of rule functions. A rule returns an
error code or None; the first failing rule of a field wins and the rest of
that field's rules are skipped. Fields never look at each other.

Only the email uniqueness rule performs I/O, through the `email_in_use`
callable supplied by the caller.
"""

import re
from collections.abc import Callable, Sequence

from email_validator import EmailNotValidError, validate_email

from .models import RegistrationRequest, ValidationErrorSet

Rule = Callable[[str | None], str | None]

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")


def not_empty(code: str) -> Rule:
    def rule(value: str | None) -> str | None:
        return code if not value else None

    return rule


def length_between(code: str, min_length: int, max_length: int | None = None) -> Rule:
    def rule(value: str | None) -> str | None:
        size = len(value or "")
        if size < min_length or (max_length is not None and size > max_length):
            return code
        return None

    return rule


def email_syntax(value: str | None) -> str | None:
    # Deliverability (DNS) checks stay off so this rule is pure
    try:
        validate_email(value or "", check_deliverability=False)
    except EmailNotValidError:
        return "email_not_valid"
    return None


def email_unique(email_in_use: Callable[[str], bool]) -> Rule:
    def rule(value: str | None) -> str | None:
        return "email_inuse" if email_in_use(value or "") else None

    return rule


def password_format(value: str | None) -> str | None:
    """Require at least one lowercase letter, one uppercase letter and one digit."""
    value = value or ""
    for pattern in (_LOWERCASE, _UPPERCASE, _DIGIT):
        if not pattern.search(value):
            return "password_format"
    return None


def field_rules(email_in_use: Callable[[str], bool]) -> dict[str, Sequence[Rule]]:
    """Rules per field, in reporting order."""
    return {
        "username": (
            not_empty("username_null"),
            length_between("username_size", USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH),
        ),
        "email": (
            not_empty("email_null"),
            email_syntax,
            email_unique(email_in_use),
        ),
        "password": (
            not_empty("password_null"),
            length_between("password_size", PASSWORD_MIN_LENGTH),
            password_format,
        ),
    }


def validate(
    request: RegistrationRequest, email_in_use: Callable[[str], bool]
) -> ValidationErrorSet:
    """
    Validate a registration request.

    Args:
        request: Raw signup data
        email_in_use: Returns True when an account already uses the email

    Returns:
        Mapping of field name to error code for invalid fields only,
        ordered username, email, password. Empty when the request is valid.
    """
    errors: ValidationErrorSet = {}
    for field_name, rules in field_rules(email_in_use).items():
        value = getattr(request, field_name)
        for rule in rules:
            code = rule(value)
            if code is not None:
                errors[field_name] = code
                break
    return errors
