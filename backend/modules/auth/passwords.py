"""
Password hashing.

bcrypt with a per-hash random salt. Hashes are stored as UTF-8 text.
"""

import bcrypt

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """One-way salted hash and verification for user passwords."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash, or a password bcrypt refuses (over 72 bytes)
            return False
