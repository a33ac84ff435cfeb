"""
Domain records - Accounts, role profiles, registration inputs and outcomes.

Records are frozen dataclasses: an Account and its profile are created
together once and never modified afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AccountRole(str, Enum):
    """Role tag carried by every Account."""

    INDIVIDUAL = "individual"
    BUSINESS_ADMIN = "business_admin"


@dataclass(frozen=True)
class Account:
    """Core identity record (email + password hash + role)."""

    user_id: str
    email: str
    password_hash: str = field(repr=False)
    role: AccountRole
    created_at: datetime


@dataclass(frozen=True)
class IndividualProfile:
    """Detail record linked 1:1 to an individual Account."""

    detail_id: str
    user_id: str
    full_name: str
    national_id: str
    date_of_birth: str | None = None
    gender: str | None = None
    occupation: str | None = None
    address: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class BusinessProfile:
    """
    Company record linked 1:1 to its business_admin Account.

    There is no separate Business entity: a company is modeled as an
    extension of its first admin user via user_id_associated.
    """

    business_detail_id: str
    user_id_associated: str
    company_name: str
    tax_code: str
    company_address: str
    industry: str | None = None
    registration_number: str | None = None
    company_phone: str | None = None
    company_email: str | None = None


Profile = IndividualProfile | BusinessProfile


@dataclass(frozen=True)
class IndividualRegistration:
    """Input for individual sign-up. Required: email, password, full_name, national_id."""

    email: str | None = None
    password: str | None = field(default=None, repr=False)
    full_name: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    national_id: str | None = None
    occupation: str | None = None
    address: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class BusinessRegistration:
    """
    Input for business sign-up.

    Required: admin_email, admin_password, company_name, tax_code, company_address.
    """

    admin_email: str | None = None
    admin_password: str | None = field(default=None, repr=False)
    company_name: str | None = None
    tax_code: str | None = None
    industry: str | None = None
    registration_number: str | None = None
    company_address: str | None = None
    company_phone: str | None = None
    company_email: str | None = None


@dataclass(frozen=True)
class IndividualRegistrationOutcome:
    user_id: str
    email: str


@dataclass(frozen=True)
class BusinessRegistrationOutcome:
    admin_user_id: str
    admin_email: str
    company_name: str
