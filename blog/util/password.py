"""Password hashing utilities (bcrypt)."""

from functools import lru_cache

import bcrypt

# bcrypt only considers the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt hash

    Raises:
        ValueError: If the password is longer than bcrypt accepts
    """
    encoded = bytes(password, encoding="utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    encoded = bytes(password, encoding="utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, bytes(password_hash, encoding="utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int = 12) -> str:
    """A throwaway hash with the given cost.

    Checking a password against it takes as long as checking a real one,
    so failed logins for unknown usernames are not measurably faster.
    """
    return hash_password("not-a-real-password", rounds=rounds)
