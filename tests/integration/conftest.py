"""
Fixtures for integration tests.

The full application is started through its lifespan with the in-memory
store and console notifier selected by environment, then the notifier is
swapped for a recording double so tests can observe delivery.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from hoaxify.api.main import app
from hoaxify.config.settings import get_settings
from tests.support import FAST_BCRYPT_COST, RecordingNotifier


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Test client running the real app lifespan on in-memory backends."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("NOTIFIER_BACKEND", "console")
    monkeypatch.setenv("BCRYPT_COST", str(FAST_BCRYPT_COST))
    get_settings.cache_clear()

    with TestClient(app) as test_client:
        app.state.notifier = RecordingNotifier()
        yield test_client

    get_settings.cache_clear()
