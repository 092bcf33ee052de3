"""
Media persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import MediaPayload


async def list_media() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM media ORDER BY id ASC")


async def get_media(media_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM media WHERE id = $1", media_id)


async def create_media(payload: MediaPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO media (url)
        VALUES ($1)
        RETURNING *
        """,
        payload.url,
    )


async def update_media(media_id: int, payload: MediaPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE media
        SET url = $1
        WHERE id = $2
        RETURNING *
        """,
        payload.url,
        media_id,
    )


async def delete_media(media_id: int) -> dict[str, Any] | None:
    return await db.fetch_one("DELETE FROM media WHERE id = $1 RETURNING *", media_id)
