"""
Shared fixtures for adversarial tests.

Provides a registration service whose hasher releases the GIL for a
realistic duration, widening the window between the uniqueness pre-check
and the insert that racing requests try to exploit.
"""

import pytest

from src.adapters.hashing.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.repository.memory import InMemoryAccountRepository
from src.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def race_repository() -> InMemoryAccountRepository:
    """Fresh repository shared by all attacker threads in a test."""
    return InMemoryAccountRepository()


@pytest.fixture
def race_service(race_repository: InMemoryAccountRepository) -> RegistrationService:
    """Service with real bcrypt hashing (cost 10) over the shared repository."""
    return RegistrationService(repository=race_repository, hasher=BcryptPasswordHasher(cost=10))
