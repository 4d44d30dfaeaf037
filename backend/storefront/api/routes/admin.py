"""Admin Routes: one-time migration of legacy plaintext passwords.

Invariants:
    - POST /api/admin/hash-passwords → {success, message, total, updated}
    - 403 when an admin key is configured and the body's adminKey differs
    - Idempotent: already-hashed rows are left alone
"""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_user_repository
from storefront.config import Settings, get_settings
from storefront.core.envelope import success_envelope
from storefront.infrastructure.repositories import UserRepository
from storefront.schemas.auth import AdminRehashRequest
from storefront.services import accounts

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/hash-passwords")
async def hash_passwords(
    body: AdminRehashRequest | None = None,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    """Scan every user and hash any credential still stored as plaintext."""
    accounts.check_admin_key(
        settings.admin_key, body.admin_key if body else None,
    )
    report = await accounts.rehash_legacy_passwords(users, settings.bcrypt_rounds)
    return success_envelope(
        message=f"Hashed {report.updated} of {report.total} passwords",
        total=report.total,
        updated=report.updated,
    )
