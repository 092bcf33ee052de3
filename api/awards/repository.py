"""
Award persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import AwardPayload


async def list_awards() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM awards ORDER BY id ASC")


async def get_award(award_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM awards WHERE id = $1", award_id)


async def create_award(payload: AwardPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO awards (image_url)
        VALUES ($1)
        RETURNING *
        """,
        payload.image_url,
    )


async def update_award(award_id: int, payload: AwardPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE awards
        SET image_url = $1
        WHERE id = $2
        RETURNING *
        """,
        payload.image_url,
        award_id,
    )


async def delete_award(award_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("DELETE FROM awards WHERE id = $1 RETURNING *", award_id)
