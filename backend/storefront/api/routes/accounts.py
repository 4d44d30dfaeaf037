"""Account Routes: login and registration.

Invariants:
    - POST /api/login → 200 user envelope (no password) | 400 missing fields | 401
    - POST /api/register → 200 created user (id, full_name, nick_name, email) | 400
"""

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_user_repository
from storefront.config import Settings, get_settings
from storefront.core.domain_types import Dataset
from storefront.core.envelope import success_envelope
from storefront.infrastructure.repositories import UserRepository
from storefront.schemas.auth import LoginRequest, RegisterRequest
from storefront.services import accounts

router = APIRouter(prefix="/api", tags=["accounts"])


@router.post("/login")
async def login(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
):
    user = await accounts.authenticate(users, body)
    return success_envelope(
        user, dataset=Dataset.USERS.value, message="Login successful",
    )


@router.post("/register")
async def register(
    body: RegisterRequest,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    created = await accounts.register(users, body, settings.bcrypt_rounds)
    return success_envelope(
        created, dataset=Dataset.USERS.value, message="Registration successful",
    )
