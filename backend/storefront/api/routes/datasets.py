"""Dataset Routes: list and get-by-id for users and products.

Invariants:
    - GET /api/{dataset} → envelope with database, count, data[] ordered by id
    - GET /api/{dataset}/{item_id} → envelope with database, data{} or 404 without data
    - User rows never include the password column (enforced by UserRepository)

Design Decisions:
    - build_dataset_router() produces both routers from one handler set
"""

from typing import Callable

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_product_repository, get_user_repository
from storefront.core.domain_types import Dataset
from storefront.core.envelope import list_envelope, success_envelope
from storefront.core.errors import NotFoundError
from storefront.core.repository_protocols import DatasetReader


def build_dataset_router(
    dataset: Dataset, get_repository: Callable[..., DatasetReader],
) -> APIRouter:
    router = APIRouter(prefix=f"/api/{dataset.value}", tags=[dataset.value])

    @router.get("")
    async def list_rows(repo: DatasetReader = Depends(get_repository)):
        rows = await repo.list_all()
        return list_envelope(dataset.value, rows)

    @router.get("/{item_id}")
    async def get_row(item_id: int, repo: DatasetReader = Depends(get_repository)):
        row = await repo.get_by_id(item_id)
        if row is None:
            raise NotFoundError(dataset.item_label, item_id)
        return success_envelope(row, dataset=dataset.value)

    return router


users_router = build_dataset_router(Dataset.USERS, get_user_repository)
products_router = build_dataset_router(Dataset.PRODUCTS, get_product_repository)
