"""
Newsletter subscription persistence (raw SQL), backed by the `subscribe` table.

`email` carries a unique constraint; duplicates surface as
asyncpg.UniqueViolationError.
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import SubscriptionPayload


async def list_subscriptions() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM subscribe
        ORDER BY subscribed_at DESC
        """
    )


async def get_subscription(subscription_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM subscribe WHERE id = $1", subscription_id)


async def create_subscription(payload: SubscriptionPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO subscribe (email)
        VALUES ($1)
        RETURNING *
        """,
        payload.email,
    )


async def update_subscription(subscription_id: int, payload: SubscriptionPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE subscribe
        SET email = $1
        WHERE id = $2
        RETURNING *
        """,
        payload.email,
        subscription_id,
    )


async def delete_subscription(subscription_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("DELETE FROM subscribe WHERE id = $1 RETURNING *", subscription_id)
