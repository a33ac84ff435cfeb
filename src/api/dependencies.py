"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.hashing.bcrypt_hasher import BcryptPasswordHasher
from src.config.settings import get_settings
from src.domain.ports import AccountRepository
from src.domain.registration import RegistrationService

# Module-level singleton - BcryptPasswordHasher is stateless
_password_hasher = BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_repository(request: Request) -> AccountRepository:
    """
    Get account repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_password_hasher() -> BcryptPasswordHasher:
    """Get bcrypt password hasher (singleton)."""
    return _password_hasher


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and password hasher for the domain service.
    """
    return RegistrationService(repository=get_repository(request), hasher=get_password_hasher())
