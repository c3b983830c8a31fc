"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration tests.
"""

import pytest

from hoaxify.adapters.repository.memory import InMemoryUserStore
from hoaxify.domain.models import Account


class StaleLookupStore(InMemoryUserStore):
    """
    Store whose uniqueness lookup never sees committed rows.

    Simulates every request passing the pre-insert lookup before any
    competitor commits, so only the unique constraint can stop duplicates.
    """

    def find_by_email(self, email: str) -> Account | None:
        return None


@pytest.fixture
def stale_store() -> StaleLookupStore:
    return StaleLookupStore()
