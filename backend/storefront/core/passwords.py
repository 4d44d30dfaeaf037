"""Password Hashing: bcrypt credential generation, verification, legacy detection.

Invariants:
    - hash_password salts randomly: same input never yields the same credential twice
    - verify_password fails closed: malformed or empty credentials return False
    - is_hashed recognizes bcrypt algorithm tags only ($2a$, $2b$, $2y$)

Design Decisions:
    - bcrypt.checkpw for comparison: constant-time by construction
    - Input truncated to 72 bytes on both sides, matching what bcrypt reads
"""

import bcrypt

DEFAULT_ROUNDS = 10
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted, configurable cost)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, credential: str | None) -> bool:
    """Constant-time comparison against a bcrypt credential."""
    if not credential:
        return False
    try:
        return bcrypt.checkpw(_encode(password), credential.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def is_hashed(value: str | None) -> bool:
    return bool(value) and value.startswith(BCRYPT_PREFIXES)
