"""API index: static capability descriptor at GET /api."""

from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["index"])

ENDPOINTS = {
    "home": "/api",
    "allUsers": "/api/users",
    "userById": "/api/users/:id",
    "allProducts": "/api/products",
    "productById": "/api/products/:id",
    "login": "/api/login",
    "register": "/api/register",
    "hashPasswords": "/api/admin/hash-passwords",
    "health": "/api/health",
}


@router.get("")
async def describe_api():
    return {
        "message": "PostgreSQL API Server - Multi Database",
        "status": "running",
        "databases": {
            "users": "Connected",
            "products": "Connected",
        },
        "endpoints": ENDPOINTS,
    }
