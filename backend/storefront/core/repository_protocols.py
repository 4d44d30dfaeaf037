"""Boundary Protocols: contracts between services and the data access layer.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy types
    - Every method may raise StorageError; none interprets the cause

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
"""

from typing import Protocol

from storefront.core.domain_types import Credential, Row, UserId


class DatasetReader(Protocol):
    """Read access shared by both datasets."""
    async def list_all(self) -> list[Row]: ...
    async def get_by_id(self, row_id: int) -> Row | None: ...


class UserStore(DatasetReader, Protocol):
    """Users dataset: authentication lookups and the two permitted writes."""
    async def find_by_email(self, email: str) -> Row | None: ...
    async def email_exists(self, email: str) -> bool: ...
    async def insert_user(self, fields: dict) -> Row: ...
    async def update_password(
        self, user_id: UserId, credential: Credential,
    ) -> None: ...
    async def list_credentials(self) -> list[tuple[UserId, str | None]]: ...
