"""
Registration domain service - Individual and business account sign-up.

This module contains the core business logic for account registration.
Both flows follow the same linear sequence:

    validate -> check email -> hash password -> build records -> atomic insert -> outcome

Account Email Space
===================

Emails are unique across every Account regardless of role: a business admin
email colliding with an existing individual email is rejected, and vice
versa. Emails are matched exactly as submitted (no trimming, no lowercasing).

Atomicity
=========

The find_by_email() pre-check only short-circuits the common duplicate case
before paying for a bcrypt hash. The authoritative uniqueness decision is
made by repository.insert_account_and_profile(), which inserts the Account
and its profile in one atomic step and reports a lost race by returning None.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from .exceptions import EmailAlreadyRegistered, MissingFields
from .models import (
    Account,
    AccountRole,
    BusinessProfile,
    BusinessRegistration,
    BusinessRegistrationOutcome,
    IndividualProfile,
    IndividualRegistration,
    IndividualRegistrationOutcome,
    Profile,
)
from .ports import AccountRepository, PasswordHasher

logger = logging.getLogger(__name__)

INDIVIDUAL_REQUIRED_FIELDS = ("email", "password", "full_name", "national_id")
BUSINESS_REQUIRED_FIELDS = (
    "admin_email",
    "admin_password",
    "company_name",
    "tax_code",
    "company_address",
)


@dataclass
class RegistrationService:
    """
    Domain service for account registration.

    Orchestrates the registration flow: required-field validation,
    email uniqueness, password hashing, and atomic record persistence.
    """

    repository: AccountRepository
    hasher: PasswordHasher

    def register_individual(
        self, registration: IndividualRegistration
    ) -> IndividualRegistrationOutcome:
        """
        Register an individual customer account.

        Args:
            registration: Submitted sign-up fields

        Returns:
            Outcome with the new user_id and email

        Raises:
            MissingFields: If email, password, full_name or national_id is absent/empty
            EmailAlreadyRegistered: If any Account already uses the email
        """
        self._require(registration, INDIVIDUAL_REQUIRED_FIELDS)
        email = registration.email
        self._ensure_email_available(email)

        password_hash = self.hasher.hash(registration.password)

        account = self._build_account(email, password_hash, AccountRole.INDIVIDUAL)
        profile = IndividualProfile(
            detail_id=self._new_id(),
            user_id=account.user_id,
            full_name=registration.full_name,
            national_id=registration.national_id,
            date_of_birth=registration.date_of_birth,
            gender=registration.gender,
            occupation=registration.occupation,
            address=registration.address,
            phone_number=registration.phone_number,
        )
        stored = self._persist(account, profile)

        return IndividualRegistrationOutcome(user_id=stored.user_id, email=stored.email)

    def register_business(self, registration: BusinessRegistration) -> BusinessRegistrationOutcome:
        """
        Register a business account together with its first admin user.

        Args:
            registration: Submitted admin credentials and company details

        Returns:
            Outcome with the admin user_id, admin email and company name

        Raises:
            MissingFields: If admin_email, admin_password, company_name,
                tax_code or company_address is absent/empty
            EmailAlreadyRegistered: If any Account already uses admin_email
        """
        self._require(registration, BUSINESS_REQUIRED_FIELDS)
        email = registration.admin_email
        self._ensure_email_available(email)

        password_hash = self.hasher.hash(registration.admin_password)

        account = self._build_account(email, password_hash, AccountRole.BUSINESS_ADMIN)
        profile = BusinessProfile(
            business_detail_id=self._new_id(),
            user_id_associated=account.user_id,
            company_name=registration.company_name,
            tax_code=registration.tax_code,
            company_address=registration.company_address,
            industry=registration.industry,
            registration_number=registration.registration_number,
            company_phone=registration.company_phone,
            company_email=registration.company_email,
        )
        stored = self._persist(account, profile)

        return BusinessRegistrationOutcome(
            admin_user_id=stored.user_id,
            admin_email=stored.email,
            company_name=profile.company_name,
        )

    def _require(self, registration: object, fields: tuple[str, ...]) -> None:
        """Raise MissingFields listing every required field that is None or empty."""
        missing = [name for name in fields if not getattr(registration, name)]
        if missing:
            logger.info("Registration rejected: missing %s", ", ".join(missing))
            raise MissingFields(missing)

    def _ensure_email_available(self, email: str) -> None:
        if self.repository.find_by_email(email) is not None:
            logger.info("Registration rejected: email already registered")
            raise EmailAlreadyRegistered(email)

    def _persist(self, account: Account, profile: Profile) -> Account:
        stored = self.repository.insert_account_and_profile(account, profile)
        if stored is None:
            # Lost a concurrent race for the same email after the pre-check
            logger.info("Registration rejected: email claimed concurrently")
            raise EmailAlreadyRegistered(account.email)

        logger.info("Registered %s account %s", stored.role.value, stored.user_id)
        return stored

    def _build_account(self, email: str, password_hash: str, role: AccountRole) -> Account:
        return Account(
            user_id=self._new_id(),
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=datetime.now(timezone.utc),
        )

    def _new_id(self) -> str:
        """Generate an opaque unique identifier (UUID4)."""
        return str(uuid.uuid4())
