"""
bcrypt password hasher - Implements PasswordHasher protocol.
"""

from dataclasses import dataclass

import bcrypt

# bcrypt only reads the first 72 bytes of its input; newer releases raise instead
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Each call generates a fresh salt, so equal inputs yield different digests.
    """

    rounds: int = 10

    def hash(self, plaintext: str) -> str:
        """
        Hash password using bcrypt with the configured cost factor.

        Input longer than 72 UTF-8 bytes is truncated to its first 72 bytes.
        """
        secret = plaintext.encode()[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds)).decode()
