"""
Unit tests for InMemoryUserStore adapter.

Tests verify the store mirrors database transaction semantics:
- Writes are invisible until commit
- Rollback discards writes and releases the email
- Unique email enforcement across committed and pending rows
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from hoaxify.adapters.repository.memory import InMemoryUserStore
from hoaxify.domain.exceptions import EmailAlreadyInUse
from hoaxify.domain.models import NewAccount


def new_account(email: str = "user1@email.com") -> NewAccount:
    return NewAccount(
        username="user1",
        email=email,
        password_hash="$2b$10$hashedpasswordvalue",
        activation_token="0123456789abcdef",
    )


class TestTransaction:
    """Tests for commit and rollback."""

    def test_commit_makes_account_visible(self, store: InMemoryUserStore) -> None:
        with store.transaction() as tx:
            created = tx.create_account(new_account())

        found = store.find_by_email("user1@email.com")
        assert found == created
        assert found.inactive is True
        assert found.id == 1

    def test_account_invisible_before_commit(self, store: InMemoryUserStore) -> None:
        with store.transaction() as tx:
            tx.create_account(new_account())
            assert store.find_by_email("user1@email.com") is None
            assert store.count() == 0

    def test_rollback_on_exception(self, store: InMemoryUserStore) -> None:
        with pytest.raises(RuntimeError), store.transaction() as tx:
            tx.create_account(new_account())
            raise RuntimeError("abort")

        assert store.count() == 0
        assert store.find_by_email("user1@email.com") is None

    def test_rollback_releases_email(self, store: InMemoryUserStore) -> None:
        with pytest.raises(RuntimeError), store.transaction() as tx:
            tx.create_account(new_account())
            raise RuntimeError("abort")

        with store.transaction() as tx:
            tx.create_account(new_account())
        assert store.count() == 1

    def test_ids_increase(self, store: InMemoryUserStore) -> None:
        with store.transaction() as tx:
            first = tx.create_account(new_account("a@email.com"))
            second = tx.create_account(new_account("b@email.com"))
        assert second.id > first.id
        assert [account.email for account in store.all()] == ["a@email.com", "b@email.com"]


class TestUniqueEmail:
    """Tests for the email unique constraint."""

    def test_duplicate_of_committed_email(self, store: InMemoryUserStore) -> None:
        with store.transaction() as tx:
            tx.create_account(new_account())

        with pytest.raises(EmailAlreadyInUse), store.transaction() as tx:
            tx.create_account(new_account())
        assert store.count() == 1

    def test_duplicate_of_pending_email(self, store: InMemoryUserStore) -> None:
        with store.transaction() as outer:
            outer.create_account(new_account())
            with pytest.raises(EmailAlreadyInUse), store.transaction() as inner:
                inner.create_account(new_account())
        assert store.count() == 1

    def test_concurrent_inserts_one_wins(self, store: InMemoryUserStore) -> None:
        def insert() -> bool:
            try:
                with store.transaction() as tx:
                    tx.create_account(new_account())
            except EmailAlreadyInUse:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: insert(), range(8)))

        assert results.count(True) == 1
        assert store.count() == 1
