"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory user store
- Recording notifier
- Localizer loaded from the bundled locale tables
- A registration service wired from the above
"""

import pytest

from hoaxify.adapters.repository.memory import InMemoryUserStore
from hoaxify.domain.registration import RegistrationService
from hoaxify.i18n import Localizer
from tests.support import FAST_BCRYPT_COST, RecordingNotifier


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture(scope="session")
def localizer() -> Localizer:
    return Localizer.from_directory()


@pytest.fixture
def service(
    store: InMemoryUserStore, notifier: RecordingNotifier, localizer: Localizer
) -> RegistrationService:
    return RegistrationService(
        store=store,
        notifier=notifier,
        localizer=localizer,
        bcrypt_cost=FAST_BCRYPT_COST,
    )
