"""Data Access Layer: parameterized queries against the users and products datasets.

Invariants:
    - list_all orders by id ascending
    - get_by_id / find_by_email return None on miss (NotFound is the caller's call)
    - User rows leave this layer without the password column, except find_by_email
      and list_credentials which exist to read it
    - Every write is a single statement committed immediately
    - Any SQLAlchemy fault becomes StorageError carrying the driver message

Design Decisions:
    - One DatasetRepository parameterized by column set: users and products share
      list/get instead of duplicating them
    - Duplicate-email IntegrityError on insert maps to EmailAlreadyRegisteredError so a
      registration race still answers 400
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import Credential, Dataset, Row, UserId
from storefront.core.errors import EmailAlreadyRegisteredError, StorageError
from storefront.models.product import Product
from storefront.models.user import (
    AUTH_COLUMNS, CREATED_COLUMNS, PUBLIC_COLUMNS, User,
)

logger = logging.getLogger(__name__)


class DatasetRepository:
    """Read access to one dataset through a fixed column projection."""

    def __init__(
        self,
        db: AsyncSession,
        dataset: Dataset,
        columns: Sequence[ColumnElement],
        id_column: ColumnElement,
    ):
        self._db = db
        self.dataset = dataset
        self._columns = tuple(columns)
        self._id_column = id_column

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncGenerator[None, None]:
        """Roll back and re-raise any SQLAlchemy fault as StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Storage failure during {operation}: {e}",
                extra={"dataset": self.dataset.value, "operation": operation},
            )
            raise StorageError(str(e), operation) from e

    async def list_all(self) -> list[Row]:
        async with self._guard("list_all"):
            result = await self._db.execute(
                select(*self._columns).order_by(self._id_column.asc()),
            )
            return [dict(row) for row in result.mappings().all()]

    async def get_by_id(self, row_id: int) -> Row | None:
        async with self._guard("get_by_id"):
            result = await self._db.execute(
                select(*self._columns).where(self._id_column == row_id),
            )
            row = result.mappings().one_or_none()
        return dict(row) if row is not None else None


class ProductRepository(DatasetRepository):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Dataset.PRODUCTS, Product.__table__.c, Product.id)


class UserRepository(DatasetRepository):
    """Users dataset: public reads plus the authentication queries and writes."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Dataset.USERS, PUBLIC_COLUMNS, User.id)

    async def find_by_email(self, email: str) -> Row | None:
        """Fetch only what login needs: id, names, email, credential."""
        async with self._guard("find_by_email"):
            result = await self._db.execute(
                select(*AUTH_COLUMNS).where(User.email == email),
            )
            row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def email_exists(self, email: str) -> bool:
        async with self._guard("email_exists"):
            result = await self._db.execute(
                select(User.id).where(User.email == email).limit(1),
            )
            return result.scalar_one_or_none() is not None

    async def insert_user(self, fields: dict) -> Row:
        """Insert one user; returns id, full_name, nick_name, email only."""
        user = User(**fields)
        try:
            self._db.add(user)
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if "email" in str(e.orig).lower():
                raise EmailAlreadyRegisteredError(fields["email"]) from e
            logger.error(f"Storage failure during insert_user: {e}")
            raise StorageError(str(e), "insert_user") from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Storage failure during insert_user: {e}")
            raise StorageError(str(e), "insert_user") from e
        return {name: getattr(user, name) for name in CREATED_COLUMNS}

    async def update_password(
        self, user_id: UserId, credential: Credential,
    ) -> None:
        async with self._guard("update_password"):
            await self._db.execute(
                update(User).where(User.id == user_id).values(password=credential),
            )
            await self._db.commit()

    async def list_credentials(self) -> list[tuple[UserId, str | None]]:
        """Every (id, stored password) pair, ordered by id."""
        async with self._guard("list_credentials"):
            result = await self._db.execute(
                select(User.id, User.password).order_by(User.id.asc()),
            )
            return [(UserId(row.id), row.password) for row in result.all()]
