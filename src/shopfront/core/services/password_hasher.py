"""bcrypt-backed password hashing."""

import bcrypt

# bcrypt ignores everything past 72 bytes; recent releases refuse longer input.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """One-way adaptive hashing with a fixed cost factor."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the salted bcrypt hash of `password` as text."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check `password` against a hash produced by `hash`."""
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False
