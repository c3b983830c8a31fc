"""
PostgreSQL repository adapter - Implements UserStore protocol.

This module provides the PostgreSQL implementation of the domain's
user store port using psycopg3 with raw SQL.

Transaction Design:
-------------------
transaction() borrows one pooled connection and wraps it in
conn.transaction(): the block commits when it exits normally and rolls
back when it exits with an exception. The registration service sends the
activation email inside that block, so a notifier failure discards the
inserted row before any other reader can see it.

The UNIQUE constraint on users.email is the final arbiter for concurrent
registrations of the same address; UniqueViolation is translated to the
domain's EmailAlreadyInUse.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from psycopg import Connection
from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from hoaxify.domain.exceptions import EmailAlreadyInUse
from hoaxify.domain.models import Account, NewAccount

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = "id, username, email, password_hash, activation_token, inactive, created_at"


def _row_to_account(row: tuple) -> Account:
    return Account(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        activation_token=row[4],
        inactive=row[5],
        created_at=row[6],
    )


class PostgresUserTransaction:
    """
    Implements UserStoreTransaction protocol on one open connection.

    Only valid inside PostgresUserStore.transaction().
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def create_account(self, account: NewAccount) -> Account:
        """
        Insert the account row inside the open transaction.

        Args:
            account: Account to insert; inactive is always written as TRUE

        Returns:
            Stored Account with database-assigned id and created_at

        Raises:
            EmailAlreadyInUse: If users.email unique constraint is violated
        """
        sql = f"""
            INSERT INTO users (username, email, password_hash, activation_token, inactive, created_at)
            VALUES (%s, %s, %s, %s, TRUE, NOW())
            RETURNING {_ACCOUNT_COLUMNS}
        """

        try:
            with self._conn.cursor() as cursor:
                cursor.execute(
                    sql,
                    (account.username, account.email, account.password_hash, account.activation_token),
                )
                row = cursor.fetchone()
        except UniqueViolation as e:
            raise EmailAlreadyInUse(account.email) from e
        return _row_to_account(row)


class PostgresUserStore:
    """
    Implements UserStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up a committed account by email.

        Args:
            email: Email address exactly as submitted

        Returns:
            Account if found, None otherwise
        """
        sql = f"SELECT {_ACCOUNT_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
            conn.commit()
        return _row_to_account(row) if row is not None else None

    @contextmanager
    def transaction(self) -> Iterator[PostgresUserTransaction]:
        """
        Open a database transaction on a pooled connection.

        Commits on normal exit, rolls back when the block raises.
        """
        with self._pool.connection() as conn, conn.transaction():
            yield PostgresUserTransaction(conn)

    def count(self) -> int:
        """Number of committed accounts."""
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM users")
            (total,) = cursor.fetchone()
            conn.commit()
        return total


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: hoaxify/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)
                conn.commit()

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
