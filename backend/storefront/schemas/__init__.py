"""Pydantic Schemas: request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies)
    - Presence of required fields checked by require_fields(), not by Pydantic

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
