"""FastAPI dependencies: per-request sessions and repositories for each dataset.

Invariants:
    - Session managers live on app.state (set by the lifespan), never in module globals
    - One AsyncSession per request per dataset, closed when the response is done
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.database import DatabaseSessionManager
from storefront.infrastructure.repositories import ProductRepository, UserRepository


def _manager(request: Request, attr: str) -> DatabaseSessionManager:
    manager = getattr(request.app.state, attr, None)
    if manager is None:
        raise RuntimeError(f"Database '{attr}' not initialized")
    return manager


async def get_users_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with _manager(request, "users_db").session() as session:
        yield session


async def get_products_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with _manager(request, "products_db").session() as session:
        yield session


def get_user_repository(
    db: AsyncSession = Depends(get_users_db),
) -> UserRepository:
    return UserRepository(db)


def get_product_repository(
    db: AsyncSession = Depends(get_products_db),
) -> ProductRepository:
    return ProductRepository(db)
