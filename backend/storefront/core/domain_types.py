"""Domain Types: enums and aliases shared by every layer.

Invariants:
    - Exactly two datasets are exposed: users and products
    - Dataset values double as URL segments and the envelope "database" field
"""

from enum import Enum
from typing import Any, NewType

UserId = NewType("UserId", int)
Credential = NewType("Credential", str)

Row = dict[str, Any]


class Dataset(str, Enum):
    """Read-only datasets reachable through the list/get routes."""
    USERS = "users"
    PRODUCTS = "products"

    @property
    def item_label(self) -> str:
        """Singular, capitalized noun used in not-found errors."""
        return "User" if self is Dataset.USERS else "Product"
