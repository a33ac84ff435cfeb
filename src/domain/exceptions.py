"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class MissingFields(RegistrationError):
    """One or more required registration fields are absent or empty."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(", ".join(fields))
        self.fields = fields


class EmailAlreadyRegistered(RegistrationError):
    """An account with this email already exists (any role)."""

    pass


class InternalError(RegistrationError):
    """Storage or hashing failure. Details are logged, never returned."""

    pass
