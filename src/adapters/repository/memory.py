"""
In-memory repository adapter - Implements AccountRepository protocol.

Default storage backend. Holds accounts and profiles in process-local
dicts; all data is lost on restart.

Concurrency
-----------
A single threading.Lock guards every read and write. The email existence
check and both inserts in insert_account_and_profile() run under the same
lock acquisition, so two concurrent registrations for one email cannot both
succeed, and no reader ever sees an Account without its profile.
"""

import threading

from src.domain.models import Account, Profile


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with process-local dicts.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Records are frozen dataclasses, so they are returned without copying.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accounts_by_email: dict[str, Account] = {}
        self._profiles_by_user_id: dict[str, Profile] = {}

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            return self._accounts_by_email.get(email)

    def insert_account_and_profile(self, account: Account, profile: Profile) -> Account | None:
        """
        Atomically store an Account and its profile if the email is free.

        Returns:
            The stored Account, or None if the email is already registered
        """
        with self._lock:
            if account.email in self._accounts_by_email:
                return None
            self._accounts_by_email[account.email] = account
            self._profiles_by_user_id[account.user_id] = profile
            return account

    def get_profile(self, user_id: str) -> Profile | None:
        with self._lock:
            return self._profiles_by_user_id.get(user_id)

    def count_accounts(self) -> int:
        """Number of stored accounts."""
        with self._lock:
            return len(self._accounts_by_email)

    def count_profiles(self) -> int:
        """Number of stored profiles (always equals count_accounts())."""
        with self._lock:
            return len(self._profiles_by_user_id)
