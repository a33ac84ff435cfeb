"""
Integration tests for PostgresAccountRepository.

Tests repository operations against a real PostgreSQL database at
DATABASE_URL. Skipped when the database is unreachable.
"""

import threading
from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.config.settings import get_settings
from src.domain.exceptions import InternalError
from src.domain.models import Account, AccountRole, BusinessProfile, IndividualProfile

pytestmark = pytest.mark.postgres


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests and apply migrations."""
    settings = get_settings()
    try:
        psycopg.connect(settings.database_url, connect_timeout=2).close()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")

    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresAccountRepository:
    """Create repository instance for each test."""
    return PostgresAccountRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean account tables before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM individual_profiles")
        conn.execute("DELETE FROM business_profiles")
        conn.execute("DELETE FROM accounts")
        conn.commit()
    yield


def make_account(user_id: str, email: str, role: AccountRole = AccountRole.INDIVIDUAL) -> Account:
    return Account(
        user_id=user_id,
        email=email,
        password_hash="$2b$10$hashedpasswordvalue",
        role=role,
        created_at=datetime.now(timezone.utc),
    )


def make_individual_profile(user_id: str) -> IndividualProfile:
    return IndividualProfile(
        detail_id=f"d-{user_id}",
        user_id=user_id,
        full_name="Nguyen A",
        national_id="001",
        date_of_birth="1990-01-01",
    )


def make_business_profile(user_id: str) -> BusinessProfile:
    return BusinessProfile(
        business_detail_id=f"b-{user_id}",
        user_id_associated=user_id,
        company_name="ABC Co",
        tax_code="T001",
        company_address="123 St",
        company_email="contact@abc.example",
    )


def count(pool: ConnectionPool, table: str) -> int:
    with pool.connection() as conn, conn.cursor() as cursor:
        cursor.execute(f"SELECT COUNT(*) FROM {table}")
        return cursor.fetchone()[0]


class TestInsertAccountAndProfile:
    """Tests for insert_account_and_profile."""

    def test_insert_individual_returns_account(
        self, repository: PostgresAccountRepository, pool: ConnectionPool
    ) -> None:
        account = make_account("u1", "a@x.com")

        assert repository.insert_account_and_profile(account, make_individual_profile("u1")) == account
        assert count(pool, "accounts") == 1
        assert count(pool, "individual_profiles") == 1

    def test_insert_business(self, repository: PostgresAccountRepository, pool: ConnectionPool) -> None:
        account = make_account("u1", "b@x.com", AccountRole.BUSINESS_ADMIN)

        repository.insert_account_and_profile(account, make_business_profile("u1"))

        assert count(pool, "business_profiles") == 1

    def test_duplicate_email_returns_none(
        self, repository: PostgresAccountRepository, pool: ConnectionPool
    ) -> None:
        repository.insert_account_and_profile(make_account("u1", "a@x.com"), make_individual_profile("u1"))

        result = repository.insert_account_and_profile(
            make_account("u2", "a@x.com", AccountRole.BUSINESS_ADMIN), make_business_profile("u2")
        )

        assert result is None
        assert count(pool, "accounts") == 1
        assert count(pool, "business_profiles") == 0

    def test_profile_failure_rolls_back_account(
        self, repository: PostgresAccountRepository, pool: ConnectionPool
    ) -> None:
        """A failing profile insert leaves no Account behind."""
        repository.insert_account_and_profile(make_account("u1", "a@x.com"), make_individual_profile("u1"))

        # Reusing detail id d-u1 violates the profile primary key
        bad_profile = IndividualProfile(
            detail_id="d-u1", user_id="u2", full_name="Nguyen B", national_id="002"
        )
        with pytest.raises(InternalError):
            repository.insert_account_and_profile(make_account("u2", "c@x.com"), bad_profile)

        assert repository.find_by_email("c@x.com") is None
        assert count(pool, "accounts") == 1


class TestLookups:
    """Tests for find_by_email and get_profile."""

    def test_find_by_email_round_trips_account(self, repository: PostgresAccountRepository) -> None:
        account = make_account("u1", "a@x.com")
        repository.insert_account_and_profile(account, make_individual_profile("u1"))

        found = repository.find_by_email("a@x.com")

        assert found.user_id == "u1"
        assert found.role is AccountRole.INDIVIDUAL
        assert found.password_hash == account.password_hash

    def test_find_by_email_exact_match(self, repository: PostgresAccountRepository) -> None:
        repository.insert_account_and_profile(make_account("u1", "a@x.com"), make_individual_profile("u1"))
        assert repository.find_by_email("A@X.COM") is None

    def test_get_individual_profile(self, repository: PostgresAccountRepository) -> None:
        profile = make_individual_profile("u1")
        repository.insert_account_and_profile(make_account("u1", "a@x.com"), profile)
        assert repository.get_profile("u1") == profile

    def test_get_business_profile(self, repository: PostgresAccountRepository) -> None:
        profile = make_business_profile("u1")
        repository.insert_account_and_profile(
            make_account("u1", "b@x.com", AccountRole.BUSINESS_ADMIN), profile
        )
        assert repository.get_profile("u1") == profile

    def test_get_profile_unknown(self, repository: PostgresAccountRepository) -> None:
        assert repository.get_profile("missing") is None


class TestConcurrentInsert:
    """The UNIQUE(email) constraint decides concurrent inserts."""

    def test_concurrent_inserts_exactly_one_succeeds(
        self, pool: ConnectionPool, repository: PostgresAccountRepository
    ) -> None:
        results: list[bool] = []
        results_lock = threading.Lock()
        num_attackers = 5

        def insert(i: int) -> None:
            stored = repository.insert_account_and_profile(
                make_account(f"u{i}", "race@x.com"), make_individual_profile(f"u{i}")
            )
            with results_lock:
                results.append(stored is not None)

        with ThreadPoolExecutor(max_workers=num_attackers) as executor:
            futures = [executor.submit(insert, i) for i in range(num_attackers)]
            for f in futures:
                f.result()

        assert results.count(True) == 1
        assert count(pool, "accounts") == 1
        assert count(pool, "individual_profiles") == 1
