"""Salted password hashing.

Hashes are produced by werkzeug and stored as
``<method>$<salt>$<digest>``, e.g. ``scrypt:32768:8:1$...``.
"""

from werkzeug.security import check_password_hash, generate_password_hash

HASH_METHODS = ("scrypt", "pbkdf2")


def hash_password(password: str, method: str = "scrypt") -> str:
    """Hash a password with a fresh random salt."""
    return generate_password_hash(password, method=method)


def is_password_hash(value: str) -> bool:
    """Check whether a stored value is a werkzeug hash rather than plaintext."""
    parts = value.split("$")
    return len(parts) == 3 and parts[0].split(":", 1)[0] in HASH_METHODS


def verify_password(password: str, stored: str) -> bool:
    """Compare a password against a stored hash. Plaintext values never match."""
    if not is_password_hash(stored):
        return False
    return check_password_hash(stored, password)
