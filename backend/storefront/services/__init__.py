"""Services Layer: account flows orchestrating hashing and data access.

Invariants:
    - Services raise StorefrontError subclasses; routes never build failure bodies
    - Hash computation runs in a worker thread, never on the event loop
"""
