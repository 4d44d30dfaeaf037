"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /api/health always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if either dataset is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from storefront.core.domain_types import Dataset

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])

_STATE_ATTRS = {Dataset.USERS: "users_db", Dataset.PRODUCTS: "products_db"}


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "storefront-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: both dataset databases must answer."""
    checks = {}
    for dataset, attr in _STATE_ATTRS.items():
        manager = getattr(request.app.state, attr, None)
        ok = await manager.health_check() if manager else False
        checks[dataset.value] = "healthy" if ok else "unavailable"

    if any(v != "healthy" for v in checks.values()):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
