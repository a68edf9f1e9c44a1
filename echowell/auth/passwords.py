"""Salted PBKDF2 password hashing.

Stored hashes look like ``<salt-hex>:<key-hex>``. The hex salt string
itself, not its decoded bytes, is the KDF salt input, which keeps existing
user records verifiable.
"""
import hashlib
import hmac
import secrets

SALT_BYTES = 16
ITERATIONS = 1000
KEY_LENGTH = 64
DIGEST = "sha512"


def _derive(password: str, salt: str) -> str:
    key = hashlib.pbkdf2_hmac(DIGEST, password.encode("utf-8"), salt.encode("utf-8"), ITERATIONS, KEY_LENGTH)
    return key.hex()


def hash_password(password: str) -> str:
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, stored: str | None) -> bool:
    if not stored or stored.count(":") != 1:
        return False

    salt, expected = stored.split(":")
    if not salt or not expected:
        return False

    try:
        expected_bytes = bytes.fromhex(expected)
    except ValueError:
        return False

    return hmac.compare_digest(bytes.fromhex(_derive(password, salt)), expected_bytes)
