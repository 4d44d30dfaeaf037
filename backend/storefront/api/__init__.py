"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the envelope from core/envelope.py

Design Decisions:
    - Thin routes delegate to services and repositories (ADR: impureim sandwich)
"""
