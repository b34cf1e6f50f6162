"""
Password hashing and session key generation.

New passwords are hashed with bcrypt, which salts every digest, after a
SHA-256 pre-hash so that passwords of any length are accepted. Records
written by the previous service hold an unsalted SHA-256 hex digest; those
still verify, and callers should re-hash them once the plain password is
known (see needs_rehash).
"""

import base64
import hashlib
import hmac
import logging
import re
import secrets

import bcrypt

logger = logging.getLogger(__name__)

# Work factor (cost) - higher = slower but more secure
BCRYPT_ROUNDS = 12

# Bytes of randomness in a session key (hex encoded to twice as many chars)
SESSION_KEY_BYTES = 32

_LEGACY_DIGEST = re.compile(r"^[0-9a-f]{64}$")


def _bcrypt_input(password: str) -> bytes:
    """
    Fixed-length secret handed to bcrypt.

    bcrypt only reads the first 72 bytes of its input and current releases
    refuse anything longer, so the password is first reduced to the base64
    of its SHA-256 digest (44 bytes).
    """
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def sha256_digest(data: str) -> str:
    """Unsalted SHA-256 hex digest, the legacy password storage format."""
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt work factor

    Returns:
        Bcrypt hash string (includes salt)
    """
    if not password:
        raise ValueError("Password cannot be empty")

    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")


def is_legacy_digest(password_hash: str) -> bool:
    return bool(_LEGACY_DIGEST.match(password_hash or ""))


def needs_rehash(password_hash: str) -> bool:
    """True when the stored digest predates bcrypt."""
    return is_legacy_digest(password_hash)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its stored digest.

    Args:
        password: Plain text password to verify
        password_hash: Stored bcrypt hash or legacy SHA-256 hex digest

    Returns:
        True if password matches, False otherwise
    """
    if not password or not password_hash:
        return False

    if is_legacy_digest(password_hash):
        return hmac.compare_digest(sha256_digest(password), password_hash)

    try:
        return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.warning("Unrecognized password hash format: %s", e)
        return False


def generate_session_key() -> str:
    """Generate an opaque, unguessable session key."""
    return secrets.token_hex(SESSION_KEY_BYTES)
