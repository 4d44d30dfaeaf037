"""Account Flows: login, registration, admin key check, legacy password rehash.

Invariants:
    - Login never compares plaintext to plaintext; registration never stores plaintext
    - Unknown email and wrong password raise the same InvalidCredentialsError
    - Returned users never carry the password field
    - Rehash skips rows already in bcrypt form, so a second run updates nothing

Design Decisions:
    - bcrypt calls wrapped in asyncio.to_thread: CPU-bound work off the event loop
    - Rehash is a sequential full scan with one UPDATE per row (ADR: one-time
      operational tool, concurrent requests are not blocked)
"""

import asyncio
import hmac
import logging
from dataclasses import dataclass

from storefront.core.domain_types import Credential, Row
from storefront.core.errors import (
    AdminKeyMismatchError, EmailAlreadyRegisteredError, InvalidCredentialsError,
)
from storefront.core.passwords import hash_password, is_hashed, verify_password
from storefront.core.repository_protocols import UserStore
from storefront.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RehashReport:
    total: int
    updated: int


def strip_credential(user: Row) -> Row:
    return {k: v for k, v in user.items() if k != "password"}


async def authenticate(users: UserStore, body: LoginRequest) -> Row:
    """Return the matching user without its credential, or raise InvalidCredentialsError."""
    body.require_fields()
    user = await users.find_by_email(body.email)
    if user is None:
        logger.warning("Login failed: unknown email")
        raise InvalidCredentialsError()

    matches = await asyncio.to_thread(
        verify_password, body.password, user["password"],
    )
    if not matches:
        logger.warning(
            "Login failed: password mismatch", extra={"user_id": user["id"]},
        )
        raise InvalidCredentialsError()

    logger.info("Login succeeded", extra={"user_id": user["id"]})
    return strip_credential(user)


async def register(
    users: UserStore, body: RegisterRequest, rounds: int,
) -> Row:
    """Create a user with a hashed credential; returns id, names, email."""
    body.require_fields()
    if await users.email_exists(body.email):
        raise EmailAlreadyRegisteredError(body.email)

    credential = await asyncio.to_thread(hash_password, body.password, rounds)
    created = await users.insert_user({
        "full_name": body.full_name,
        "email": body.email,
        "password": credential,
        **body.profile_fields(),
    })
    logger.info("Registered user", extra={"user_id": created["id"]})
    return created


def check_admin_key(configured: str | None, supplied: str | None) -> None:
    """No-op when no admin key is configured; otherwise require an exact match."""
    if not configured:
        return
    if supplied is None or not hmac.compare_digest(
        configured.encode("utf-8"), supplied.encode("utf-8"),
    ):
        logger.warning("Admin key mismatch on password rehash")
        raise AdminKeyMismatchError()


async def rehash_legacy_passwords(users: UserStore, rounds: int) -> RehashReport:
    """Hash every stored plaintext password in place."""
    rows = await users.list_credentials()
    updated = 0
    for user_id, stored in rows:
        if not stored or is_hashed(stored):
            continue
        credential = await asyncio.to_thread(hash_password, stored, rounds)
        await users.update_password(user_id, Credential(credential))
        updated += 1

    logger.info(f"Password rehash complete: {updated}/{len(rows)} updated")
    return RehashReport(total=len(rows), updated=updated)
