"""Account Schemas: login, registration, and admin rehash bodies.

Invariants:
    - Every field is optional at parse time; required ones are enforced by
      require_fields() so a missing field answers with the envelope, not a parse error
    - Blank strings on optional fields normalize to None
    - No format checks on email or password strength

Design Decisions:
    - AdminRehashRequest accepts the camelCase `adminKey` used by existing clients
"""

from datetime import date
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.core.errors import MissingFieldsError


class PresenceCheckedRequest(BaseModel):
    """Body whose required fields are checked for presence after parsing."""

    required_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        missing = []
        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def require_fields(self) -> None:
        """Raise MissingFieldsError naming every absent required field."""
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(missing)


class LoginRequest(PresenceCheckedRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("email", "password")

    email: str | None = None
    password: str | None = None


class RegisterRequest(PresenceCheckedRequest):
    """Registration body: full_name, email, password required."""

    required_fields: ClassVar[tuple[str, ...]] = ("full_name", "email", "password")

    full_name: str | None = None
    nick_name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    address: str | None = None
    birthday: date | None = None

    @field_validator("nick_name", "phone", "address", "birthday", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def profile_fields(self) -> dict:
        """Optional columns stored alongside the credential."""
        return {
            "nick_name": self.nick_name,
            "phone": self.phone,
            "address": self.address,
            "birthday": self.birthday,
        }


class AdminRehashRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admin_key: str | None = Field(None, alias="adminKey")
