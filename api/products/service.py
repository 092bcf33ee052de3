"""
Product request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import ProductPayload

RESOURCE = "Product"
REQUIRED_FIELDS = ("name",)


async def list_products() -> list[dict]:
    async with crud.statement_guard("product_list"):
        return await repository.list_products()


async def get_product(product_id: int) -> dict:
    crud.require_addressable(product_id, resource=RESOURCE)
    async with crud.statement_guard("product_get"):
        row = await repository.get_product(product_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_product(payload: ProductPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("product_create", conflict_detail="Product already exists."):
        row = await repository.create_product(payload)
    if row is None:
        raise RuntimeError("Failed to create product.")
    return row


async def update_product(product_id: int, payload: ProductPayload) -> dict:
    crud.require_addressable(product_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("product_update", conflict_detail="Product already exists."):
        row = await repository.update_product(product_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_product(product_id: int) -> dict:
    crud.require_addressable(product_id, resource=RESOURCE)
    async with crud.statement_guard("product_delete"):
        row = await repository.delete_product(product_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Product deleted successfully.", "deleted_product": deleted}
