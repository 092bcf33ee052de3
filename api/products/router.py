"""
Product API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import ProductPayload

router = APIRouter()


@router.get("/api/products")
async def list_products() -> list[dict]:
    """
    All products, alphabetical by name.
    """
    return await service.list_products()


@router.get("/api/products/{product_id}")
async def get_product(product_id: int) -> dict:
    return await service.get_product(product_id)


@router.post("/api/products", status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductPayload) -> dict:
    return await service.create_product(payload)


@router.put("/api/products/{product_id}")
async def update_product(product_id: int, payload: ProductPayload) -> dict:
    return await service.update_product(product_id, payload)


@router.delete("/api/products/{product_id}")
async def delete_product(product_id: int) -> dict:
    return await service.delete_product(product_id)
