"""
In-memory repository adapter - Implements UserStore protocol.

Process-local store for development and tests. Mirrors the transactional
behavior of the PostgreSQL adapter: rows created in a transaction stay
invisible until commit, are discarded on rollback, and a second
transaction inserting an email already committed or pending fails with
EmailAlreadyInUse, the way a unique index does.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from hoaxify.domain.exceptions import EmailAlreadyInUse
from hoaxify.domain.models import Account, NewAccount


class InMemoryUserTransaction:
    """Implements UserStoreTransaction protocol with staged writes."""

    def __init__(self, store: "InMemoryUserStore") -> None:
        self._store = store
        self.staged: list[Account] = []

    def create_account(self, account: NewAccount) -> Account:
        stored = self._store._reserve(account)
        self.staged.append(stored)
        return stored


class InMemoryUserStore:
    """
    Implements UserStore protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Safe to share between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accounts: dict[str, Account] = {}
        self._pending: set[str] = set()
        self._next_id = 1

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            return self._accounts.get(email)

    @contextmanager
    def transaction(self) -> Iterator[InMemoryUserTransaction]:
        tx = InMemoryUserTransaction(self)
        try:
            yield tx
        except BaseException:
            self._release(tx.staged)
            raise
        self._commit(tx.staged)

    def all(self) -> list[Account]:
        """Committed accounts in insertion order."""
        with self._lock:
            return list(self._accounts.values())

    def count(self) -> int:
        with self._lock:
            return len(self._accounts)

    def _reserve(self, account: NewAccount) -> Account:
        with self._lock:
            if account.email in self._accounts or account.email in self._pending:
                raise EmailAlreadyInUse(account.email)
            self._pending.add(account.email)
            stored = Account(
                id=self._next_id,
                username=account.username,
                email=account.email,
                password_hash=account.password_hash,
                activation_token=account.activation_token,
                inactive=True,
                created_at=datetime.now(timezone.utc),
            )
            self._next_id += 1
            return stored

    def _commit(self, staged: list[Account]) -> None:
        with self._lock:
            for account in staged:
                self._pending.discard(account.email)
                self._accounts[account.email] = account

    def _release(self, staged: list[Account]) -> None:
        with self._lock:
            for account in staged:
                self._pending.discard(account.email)
