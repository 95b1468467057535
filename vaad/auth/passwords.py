"""Credential verification for the shared admin password."""

import logging

import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with bcrypt using a fresh salt.

    Raises:
        ValueError: If the UTF-8 encoded password is longer than 72 bytes
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password is {len(encoded)} bytes, bcrypt accepts at most "
            f"{BCRYPT_MAX_PASSWORD_BYTES}"
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a submitted password against a stored bcrypt hash.

    The comparison is done by bcrypt itself. Any failure, including a
    malformed or empty hash, counts as a mismatch. Passwords longer than
    72 bytes can never have been hashed, so they never match.

    Args:
        password: Password as submitted by the client
        password_hash: Stored bcrypt hash

    Returns:
        True only if the password matches the hash
    """
    if not password_hash:
        return False

    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        logger.warning("Password verification rejected an over-long password")
        return False

    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except Exception as e:
        logger.warning(f"Password verification failed with error: {type(e).__name__}")
        return False
