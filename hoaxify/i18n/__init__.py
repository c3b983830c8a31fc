"""Localization - message code lookup and locale negotiation."""

from .localizer import LOCALES_DIR, Localizer

__all__ = ["LOCALES_DIR", "Localizer"]
