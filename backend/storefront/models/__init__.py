"""ORM Models: SQLAlchemy declarative models for both datasets.

Invariants:
    - All models inherit from Base (db/base.py)
    - users and products live in separate databases; no relationships cross them
"""

from storefront.models.user import User  # noqa: F401
from storefront.models.product import Product  # noqa: F401
