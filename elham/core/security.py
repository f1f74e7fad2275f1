"""
Password hashing and session token generation.

bcrypt with a fixed work factor for admin passwords; tokens come from
the OS CSPRNG through ``secrets``.

Dependencies: bcrypt, secrets (stdlib)
System role: Credential primitives for the session manager
"""

import secrets

import bcrypt

BCRYPT_ROUNDS = 12
TOKEN_BYTES = 32
# bcrypt only reads the first 72 bytes; longer input is truncated rather
# than rejected so every password takes the same path.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


# Compared against when the email is unknown so login latency does not
# reveal whether an account exists. Built at import so no request pays for it.
_DUMMY_HASH = bcrypt.hashpw(b"elham-placeholder", bcrypt.gensalt(rounds=BCRYPT_ROUNDS))


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plain text password, truncated to 72 bytes
        rounds: bcrypt cost factor

    Returns:
        str: Hash in modular crypt format ($2b$...)
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Check a password against a stored bcrypt hash.

    A missing or malformed hash never matches; the comparison still
    costs one bcrypt round trip.
    """
    candidate = _encode(password)
    if not password_hash:
        bcrypt.checkpw(candidate, _DUMMY_HASH)
        return False
    try:
        return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError:
        return False


def generate_session_token() -> str:
    """Return 256 bits of randomness as 64 lowercase hex characters."""
    return secrets.token_hex(TOKEN_BYTES)
