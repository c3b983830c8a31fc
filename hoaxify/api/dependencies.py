"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes, plus the
factories the application lifespan uses to build adapters from settings.
"""

from fastapi import Header, Request

from hoaxify.adapters.smtp import ConsoleNotifier, SmtpNotifier
from hoaxify.config.settings import Settings, get_settings
from hoaxify.domain.ports import Notifier, UserStore
from hoaxify.domain.registration import RegistrationService
from hoaxify.i18n import Localizer


def create_notifier(settings: Settings) -> Notifier:
    """Build the notifier selected by settings.notifier_backend."""
    if settings.notifier_backend == "console":
        return ConsoleNotifier()
    return SmtpNotifier(
        host=settings.smtp_host,
        port=settings.smtp_port,
        sender=settings.mail_from,
        timeout=settings.smtp_timeout_seconds,
    )


def create_localizer(settings: Settings) -> Localizer:
    """Load bundled locale tables with the configured default locale."""
    return Localizer.from_directory(default_locale=settings.default_locale)


def get_user_store(request: Request) -> UserStore:
    """
    Get user store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_store


def get_notifier(request: Request) -> Notifier:
    """Get notifier from app state."""
    return request.app.state.notifier


def get_localizer(request: Request) -> Localizer:
    """Get localizer from app state."""
    return request.app.state.localizer


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the user store, notifier and localizer for the domain service.
    """
    settings = get_settings()
    return RegistrationService(
        store=get_user_store(request),
        notifier=get_notifier(request),
        localizer=get_localizer(request),
        bcrypt_cost=settings.bcrypt_cost,
        token_length=settings.activation_token_length,
    )


def get_locale(
    request: Request,
    accept_language: str | None = Header(default=None),
) -> str:
    """Negotiate the response locale from the Accept-Language header."""
    return get_localizer(request).negotiate(accept_language)
