"""Infrastructure Layer: database handles, repositories, logging.

Invariants:
    - Every SQLAlchemy exception leaving this layer is a StorageError
"""
