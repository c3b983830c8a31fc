"""
Credential helpers - password hashing and activation token generation.
"""

import secrets

import bcrypt

# bcrypt only reads the first 72 bytes of a key; newer releases refuse longer ones
BCRYPT_MAX_KEY_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash password using bcrypt with a fresh salt.

    The same plaintext hashes differently on every call; bcrypt.checkpw
    verifies either hash. Passwords longer than 72 UTF-8 bytes are
    truncated to 72 bytes before hashing, so only that prefix is
    significant.
    """
    key = password.encode()[:BCRYPT_MAX_KEY_BYTES]
    return bcrypt.hashpw(key, bcrypt.gensalt(rounds=rounds)).decode()


def generate_token(length: int) -> str:
    """
    Generate a cryptographically random hex token of exactly `length` characters.

    Uses secrets module for cryptographic randomness.
    """
    if length < 1:
        raise ValueError(f"Token length must be positive, got {length}")
    return secrets.token_hex((length + 1) // 2)[:length]
