"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

bcrypt is an adaptive hash: the cost factor doubles the work per step,
and every hash carries its own random salt.

bcrypt only accepts 72 bytes of input. Passwords are first digested with
SHA-256 and base64-encoded (44 ASCII bytes) so passwords of any length,
including multibyte text, are hashed in full without truncation.
"""

import base64
import hashlib

import bcrypt

MIN_BCRYPT_COST = 10


def _prehash(plaintext: str) -> bytes:
    """SHA-256 digest of the UTF-8 password, base64-encoded for bcrypt."""
    return base64.b64encode(hashlib.sha256(plaintext.encode()).digest())


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int = MIN_BCRYPT_COST) -> None:
        """
        Initialize hasher with a bcrypt work factor.

        Args:
            cost: bcrypt cost factor (log2 rounds), at least 10

        Raises:
            ValueError: If cost is below 10
        """
        if cost < MIN_BCRYPT_COST:
            raise ValueError(f"bcrypt cost must be >= {MIN_BCRYPT_COST}, got {cost}")
        self._cost = cost

    @property
    def cost(self) -> int:
        return self._cost

    def hash(self, plaintext: str) -> str:
        """Hash password of any length with a fresh salt at the configured cost."""
        return bcrypt.hashpw(_prehash(plaintext), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Constant-time check of a plaintext password against a stored hash."""
        return bcrypt.checkpw(_prehash(plaintext), password_hash.encode())
