"""Response Envelope: the uniform JSON body returned by every route.

Invariants:
    - Every body carries a boolean `success`
    - Success bodies: optional `database`, `count`, `message`, extra scalars, then `data`
    - Failure bodies: `error` (short category) and `message` (detail); never `data`
"""

from typing import Any

from storefront.core.domain_types import Row


def success_envelope(
    data: Any = None,
    *,
    dataset: str | None = None,
    count: int | None = None,
    message: str | None = None,
    **extra: Any,
) -> dict:
    body: dict[str, Any] = {"success": True}
    if dataset is not None:
        body["database"] = dataset
    if count is not None:
        body["count"] = count
    if message is not None:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return body


def list_envelope(dataset: str, rows: list[Row]) -> dict:
    """Envelope for a full listing: dataset name, row count, rows."""
    return success_envelope(rows, dataset=dataset, count=len(rows))


def error_envelope(error: str, message: str | None = None) -> dict:
    body: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return body
