"""Storefront API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StorefrontError → envelope responses
    - CORS configured from settings (not hardcoded)
    - One DatabaseSessionManager per dataset, created on startup and disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Managers stored on app.state and injected through dependencies (ADR: no ambient pools)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import accounts, admin, datasets, health, index
from storefront.config import get_settings
from storefront.infrastructure.database import DatabaseSessionManager
from storefront.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    pool = {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }
    app.state.users_db = DatabaseSessionManager(
        "users", settings.users_database_url, **pool,
    )
    app.state.products_db = DatabaseSessionManager(
        "products", settings.products_database_url, **pool,
    )
    logger.info("Storefront API started")
    yield
    await app.state.users_db.dispose()
    await app.state.products_db.dispose()
    logger.info("Storefront API shutting down")


app = FastAPI(
    title="Storefront API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(index.router)
app.include_router(health.router)
app.include_router(datasets.users_router)
app.include_router(datasets.products_router)
app.include_router(accounts.router)
app.include_router(admin.router)

register_error_handlers(app)
