"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Atomicity Design
----------------
insert_account_and_profile() runs both INSERTs on one connection inside one
transaction:

1. **INSERT ... ON CONFLICT (email) DO NOTHING RETURNING user_id**: the
   UNIQUE constraint on accounts.email makes the claim atomic. Concurrent
   inserts for the same email block on the index entry; exactly one returns
   a row, the others return nothing.

2. **Profile INSERT**: only runs when step 1 returned a row. Any failure
   raises out of the pool's connection context, which rolls back the
   transaction, so no Account is ever committed without its profile.

Driver errors are wrapped in the domain InternalError so callers never see
psycopg types.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import InternalError
from src.domain.models import Account, AccountRole, BusinessProfile, IndividualProfile, Profile

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = "user_id, email, password_hash, role, created_at"


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> Account | None:
        sql = f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE email = %s"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Account lookup failed: %s", e)
            raise InternalError("Account lookup failed") from e

        return _row_to_account(row) if row is not None else None

    def insert_account_and_profile(self, account: Account, profile: Profile) -> Account | None:
        """
        Atomically insert an Account and its profile if the email is free.

        Args:
            account: New Account record
            profile: IndividualProfile or BusinessProfile for the account

        Returns:
            The stored Account, or None if the email is already registered
        """
        account_sql = f"""
            INSERT INTO accounts ({_ACCOUNT_COLUMNS})
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING user_id
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    account_sql,
                    (
                        account.user_id,
                        account.email,
                        account.password_hash,
                        account.role.value,
                        account.created_at,
                    ),
                )
                if cursor.fetchone() is None:
                    # Email already taken - nothing was written
                    conn.rollback()
                    return None

                _insert_profile(cursor, profile)
                conn.commit()
        except psycopg.Error as e:
            logger.error("Account insert failed for user %s: %s", account.user_id, e)
            raise InternalError("Account insert failed") from e

        return account

    def get_profile(self, user_id: str) -> Profile | None:
        individual_sql = """
            SELECT detail_id, user_id, full_name, national_id, date_of_birth,
                   gender, occupation, address, phone_number
            FROM individual_profiles
            WHERE user_id = %s
        """
        business_sql = """
            SELECT business_detail_id, user_id_associated, company_name, tax_code,
                   company_address, industry, registration_number, company_phone,
                   company_email
            FROM business_profiles
            WHERE user_id_associated = %s
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(individual_sql, (user_id,))
                row = cursor.fetchone()
                if row is not None:
                    return IndividualProfile(*row)

                cursor.execute(business_sql, (user_id,))
                row = cursor.fetchone()
                if row is not None:
                    return BusinessProfile(*row)
        except psycopg.Error as e:
            logger.error("Profile lookup failed for user %s: %s", user_id, e)
            raise InternalError("Profile lookup failed") from e

        return None


def _row_to_account(row: tuple) -> Account:
    return Account(
        user_id=row[0],
        email=row[1],
        password_hash=row[2],
        role=AccountRole(row[3]),
        created_at=row[4],
    )


def _insert_profile(cursor: psycopg.Cursor, profile: Profile) -> None:
    if isinstance(profile, IndividualProfile):
        cursor.execute(
            """
            INSERT INTO individual_profiles (
                detail_id, user_id, full_name, national_id, date_of_birth,
                gender, occupation, address, phone_number
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                profile.detail_id,
                profile.user_id,
                profile.full_name,
                profile.national_id,
                profile.date_of_birth,
                profile.gender,
                profile.occupation,
                profile.address,
                profile.phone_number,
            ),
        )
    else:
        cursor.execute(
            """
            INSERT INTO business_profiles (
                business_detail_id, user_id_associated, company_name, tax_code,
                company_address, industry, registration_number, company_phone,
                company_email
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                profile.business_detail_id,
                profile.user_id_associated,
                profile.company_name,
                profile.tax_code,
                profile.company_address,
                profile.industry,
                profile.registration_number,
                profile.company_phone,
                profile.company_email,
            ),
        )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
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

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
