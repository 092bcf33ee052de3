"""
Job application persistence (raw SQL), backed by the `apply` table.
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import ApplicationPayload


async def list_applications() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM apply
        ORDER BY created_at DESC
        """
    )


async def get_application(application_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM apply
        WHERE id = $1
        """,
        application_id,
    )


async def create_application(payload: ApplicationPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO apply (name, email, position)
        VALUES ($1, $2, $3)
        RETURNING *
        """,
        payload.name,
        payload.email,
        payload.position,
    )


async def update_application(application_id: int, payload: ApplicationPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE apply
        SET name = $1,
            email = $2,
            position = $3
        WHERE id = $4
        RETURNING *
        """,
        payload.name,
        payload.email,
        payload.position,
        application_id,
    )


async def delete_application(application_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM apply
        WHERE id = $1
        RETURNING *
        """,
        application_id,
    )
