"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Account, Profile


class AccountRepository(Protocol):
    """Port interface for account and profile persistence."""

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an Account by exact email match, regardless of role.

        Args:
            email: Email address exactly as submitted

        Returns:
            The matching Account, or None
        """
        ...

    def insert_account_and_profile(self, account: Account, profile: Profile) -> Account | None:
        """
        Atomically insert an Account and its profile if the email is free.

        The email existence check and both writes form a single atomic
        operation: concurrent callers with the same email see exactly one
        success. Either both records are stored or neither is.

        Args:
            account: New Account record
            profile: IndividualProfile or BusinessProfile referencing account.user_id

        Returns:
            The stored Account, or None if the email is already registered
        """
        ...

    def get_profile(self, user_id: str) -> Profile | None:
        """
        Return the profile linked to an Account.

        Args:
            user_id: Account identifier

        Returns:
            IndividualProfile or BusinessProfile, or None if unknown
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way adaptive password hashing."""

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password with a fresh salt.

        Args:
            plaintext: User's password

        Returns:
            Opaque hash string
        """
        ...
