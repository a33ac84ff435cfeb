"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repository and bcrypt hasher instances
- A RegistrationService wired to both
- Valid registration payloads (domain inputs and JSON bodies)
"""

import pytest

from src.adapters.hashing.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.repository.memory import InMemoryAccountRepository
from src.domain.models import BusinessRegistration, IndividualRegistration
from src.domain.registration import RegistrationService


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost factor."""
    return BcryptPasswordHasher(cost=10)


@pytest.fixture
def service(
    repository: InMemoryAccountRepository, hasher: BcryptPasswordHasher
) -> RegistrationService:
    """Registration service backed by the in-memory repository."""
    return RegistrationService(repository=repository, hasher=hasher)


@pytest.fixture
def individual_registration() -> IndividualRegistration:
    """Individual sign-up with every field populated."""
    return IndividualRegistration(
        email="a@x.com",
        password="pw123456",
        full_name="Nguyen A",
        date_of_birth="1990-01-01",
        gender="female",
        national_id="001",
        occupation="engineer",
        address="1 Main St",
        phone_number="0900000001",
    )


@pytest.fixture
def business_registration() -> BusinessRegistration:
    """Business sign-up with every field populated."""
    return BusinessRegistration(
        admin_email="b@x.com",
        admin_password="pw123456",
        company_name="ABC Co",
        tax_code="T001",
        industry="retail",
        registration_number="REG-42",
        company_address="123 St",
        company_phone="0280000000",
        company_email="contact@abc.example",
    )


@pytest.fixture
def individual_body() -> dict:
    """Minimal valid JSON body for POST /api/auth/register/individual."""
    return {
        "email": "a@x.com",
        "password": "pw123456",
        "fullName": "Nguyen A",
        "nationalId": "001",
    }


@pytest.fixture
def business_body() -> dict:
    """Minimal valid JSON body for POST /api/auth/register/business."""
    return {
        "adminEmail": "b@x.com",
        "adminPassword": "pw123456",
        "companyName": "ABC Co",
        "taxCode": "T001",
        "companyAddress": "123 St",
    }
