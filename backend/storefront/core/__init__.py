"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Password hashing is synchronous; callers decide where it runs

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
