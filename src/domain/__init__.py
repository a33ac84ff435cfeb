"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for individual and business
account registration. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import EmailAlreadyRegistered, InternalError, MissingFields, RegistrationError
from .models import (
    Account,
    AccountRole,
    BusinessProfile,
    BusinessRegistration,
    BusinessRegistrationOutcome,
    IndividualProfile,
    IndividualRegistration,
    IndividualRegistrationOutcome,
)
from .ports import AccountRepository, PasswordHasher
from .registration import RegistrationService

__all__ = [
    "Account",
    "AccountRepository",
    "AccountRole",
    "BusinessProfile",
    "BusinessRegistration",
    "BusinessRegistrationOutcome",
    "EmailAlreadyRegistered",
    "IndividualProfile",
    "IndividualRegistration",
    "IndividualRegistrationOutcome",
    "InternalError",
    "MissingFields",
    "PasswordHasher",
    "RegistrationError",
    "RegistrationService",
]
