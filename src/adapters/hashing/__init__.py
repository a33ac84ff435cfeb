"""Hashing adapters - Password hasher implementations."""

from .bcrypt_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
