"""Account Flows: login, register, admin key, rehash against an in-memory UserStore.

Invariants:
    - Unknown email and wrong password are indistinguishable
    - Registration stores a credential that verifies, never the plaintext
    - Rehash is idempotent
"""

import pytest

from storefront.core.errors import (
    AdminKeyMismatchError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    MissingFieldsError,
)
from storefront.core.passwords import hash_password, is_hashed, verify_password
from storefront.schemas.auth import LoginRequest, RegisterRequest
from storefront.services.accounts import (
    authenticate,
    check_admin_key,
    register,
    rehash_legacy_passwords,
)

ROUNDS = 4


class FakeUserStore:
    """Dict-backed UserStore; records every update_password call."""

    def __init__(self):
        self.rows: dict[int, dict] = {}
        self.updates: list[int] = []

    def add(self, **row):
        row.setdefault("id", len(self.rows) + 1)
        row.setdefault("nick_name", None)
        self.rows[row["id"]] = row
        return row

    async def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    async def get_by_id(self, row_id):
        return self.rows.get(row_id)

    async def find_by_email(self, email):
        for row in self.rows.values():
            if row["email"] == email:
                return dict(row)
        return None

    async def email_exists(self, email):
        return await self.find_by_email(email) is not None

    async def insert_user(self, fields):
        row = self.add(**fields)
        return {k: row[k] for k in ("id", "full_name", "nick_name", "email")}

    async def update_password(self, user_id, credential):
        self.updates.append(user_id)
        self.rows[user_id]["password"] = credential

    async def list_credentials(self):
        return [(k, self.rows[k]["password"]) for k in sorted(self.rows)]


@pytest.fixture
def store():
    return FakeUserStore()


# ─── authenticate ────────────────────────────────────────────────

async def test_authenticate_returns_user_without_password(store):
    store.add(full_name="Ann Lee", email="ann@example.com",
              password=hash_password("s3cret", ROUNDS))
    user = await authenticate(store, LoginRequest(email="ann@example.com", password="s3cret"))
    assert user["email"] == "ann@example.com"
    assert "password" not in user


async def test_unknown_email_and_wrong_password_look_identical(store):
    store.add(full_name="Ann Lee", email="ann@example.com",
              password=hash_password("s3cret", ROUNDS))
    with pytest.raises(InvalidCredentialsError) as unknown:
        await authenticate(store, LoginRequest(email="who@example.com", password="s3cret"))
    with pytest.raises(InvalidCredentialsError) as wrong:
        await authenticate(store, LoginRequest(email="ann@example.com", password="wrong"))
    assert unknown.value.to_response() == wrong.value.to_response()


async def test_authenticate_rejects_legacy_plaintext_row(store):
    store.add(full_name="Bo", email="bo@example.com", password="hunter2")
    with pytest.raises(InvalidCredentialsError):
        await authenticate(store, LoginRequest(email="bo@example.com", password="hunter2"))


async def test_authenticate_requires_both_fields(store):
    with pytest.raises(MissingFieldsError) as exc_info:
        await authenticate(store, LoginRequest(email="ann@example.com"))
    assert exc_info.value.fields == ["password"]


# ─── register ────────────────────────────────────────────────────

async def test_register_stores_verifiable_hash(store):
    created = await register(
        store,
        RegisterRequest(full_name="Ann Lee", email="ann@example.com", password="s3cret"),
        ROUNDS,
    )
    stored = store.rows[created["id"]]["password"]
    assert stored != "s3cret"
    assert verify_password("s3cret", stored)
    assert "password" not in created


async def test_register_keeps_optional_profile(store):
    created = await register(
        store,
        RegisterRequest(full_name="Ann Lee", nick_name="ann", email="ann@example.com",
                        password="s3cret", phone="555-0100", address="1 Main St"),
        ROUNDS,
    )
    assert created["nick_name"] == "ann"
    assert store.rows[created["id"]]["phone"] == "555-0100"


async def test_register_duplicate_email(store):
    store.add(full_name="Ann Lee", email="ann@example.com", password="x")
    with pytest.raises(EmailAlreadyRegisteredError):
        await register(
            store,
            RegisterRequest(full_name="Other", email="ann@example.com", password="p"),
            ROUNDS,
        )
    assert len(store.rows) == 1


async def test_register_missing_fields_touches_nothing(store):
    with pytest.raises(MissingFieldsError) as exc_info:
        await register(store, RegisterRequest(email="ann@example.com"), ROUNDS)
    assert exc_info.value.fields == ["full_name", "password"]
    assert store.rows == {}


# ─── check_admin_key ─────────────────────────────────────────────

def test_admin_key_not_configured_allows_anything():
    check_admin_key(None, None)
    check_admin_key("", "whatever")


def test_admin_key_match():
    check_admin_key("letmein", "letmein")


@pytest.mark.parametrize("supplied", [None, "", "LETMEIN", "letmein "])
def test_admin_key_mismatch(supplied):
    with pytest.raises(AdminKeyMismatchError):
        check_admin_key("letmein", supplied)


# ─── rehash_legacy_passwords ─────────────────────────────────────

async def test_rehash_hashes_only_plaintext_rows(store):
    already = hash_password("kept", ROUNDS)
    store.add(full_name="A", email="a@example.com", password="plain-a")
    store.add(full_name="B", email="b@example.com", password=already)
    store.add(full_name="C", email="c@example.com", password=None)
    store.add(full_name="D", email="d@example.com", password="plain-d")

    report = await rehash_legacy_passwords(store, ROUNDS)

    assert (report.total, report.updated) == (4, 2)
    assert store.updates == [1, 4]
    assert store.rows[2]["password"] == already
    assert store.rows[3]["password"] is None
    assert is_hashed(store.rows[1]["password"])
    assert verify_password("plain-a", store.rows[1]["password"])


async def test_rehash_is_idempotent(store):
    store.add(full_name="A", email="a@example.com", password="plain-a")
    await rehash_legacy_passwords(store, ROUNDS)
    second = await rehash_legacy_passwords(store, ROUNDS)
    assert (second.total, second.updated) == (1, 0)


async def test_rehash_on_empty_table(store):
    report = await rehash_legacy_passwords(store, ROUNDS)
    assert (report.total, report.updated) == (0, 0)
