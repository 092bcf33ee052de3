"""
Product persistence (raw SQL).
"""

from __future__ import annotations

import json
from typing import Any

from core import db

from .schemas import ProductPayload


def _json_arg(value: Any) -> str | None:
    """
    asyncpg does not encode Python objects for json/jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=True)


def _decode_row(row: dict[str, Any] | None) -> dict[str, Any] | None:
    # jsonb comes back as text without a registered codec.
    if row is not None and isinstance(row.get("specifications"), str):
        row["specifications"] = json.loads(row["specifications"])
    return row


def _args(payload: ProductPayload) -> tuple[Any, ...]:
    return (
        payload.name,
        payload.tagline,
        payload.description,
        payload.price,
        payload.main_image_url,
        payload.image_urls,
        payload.video_url,
        payload.category,
        payload.features_text,
        payload.tco_savings_text,
        payload.tco_savings_image_url,
        _json_arg(payload.specifications),
        payload.related_products_ids,
    )


async def list_products() -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        """
        SELECT *
        FROM products
        ORDER BY name ASC
        """
    )
    return [_decode_row(row) for row in rows]


async def get_product(product_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(
        """
        SELECT *
        FROM products
        WHERE id = $1
        """,
        product_id,
    )
    return _decode_row(row)


async def create_product(payload: ProductPayload) -> dict[str, Any] | None:
    row = await db.fetch_one(
        """
        INSERT INTO products (
            name, tagline, description, price, main_image_url, image_urls,
            video_url, category, features_text, tco_savings_text,
            tco_savings_image_url, specifications, related_products_ids
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12::jsonb, $13)
        RETURNING *
        """,
        *_args(payload),
    )
    return _decode_row(row)


async def update_product(product_id: int, payload: ProductPayload) -> dict[str, Any] | None:
    row = await db.fetch_one(
        """
        UPDATE products
        SET name = $1,
            tagline = $2,
            description = $3,
            price = $4,
            main_image_url = $5,
            image_urls = $6,
            video_url = $7,
            category = $8,
            features_text = $9,
            tco_savings_text = $10,
            tco_savings_image_url = $11,
            specifications = $12::jsonb,
            related_products_ids = $13
        WHERE id = $14
        RETURNING *
        """,
        *_args(payload),
        product_id,
    )
    return _decode_row(row)


async def delete_product(product_id: int) -> dict[str, Any] | None:
    row = await db.fetch_one(
        """
        DELETE FROM products
        WHERE id = $1
        RETURNING *
        """,
        product_id,
    )
    return _decode_row(row)
