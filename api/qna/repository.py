"""
Q&A persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import QnaPayload


async def list_entries() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM qna
        ORDER BY id ASC
        """
    )


async def get_entry(entry_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM qna
        WHERE id = $1
        """,
        entry_id,
    )


async def create_entry(payload: QnaPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO qna (question, answer)
        VALUES ($1, $2)
        RETURNING *
        """,
        payload.question,
        payload.answer,
    )


async def update_entry(entry_id: int, payload: QnaPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE qna
        SET question = $1,
            answer = $2
        WHERE id = $3
        RETURNING *
        """,
        payload.question,
        payload.answer,
        entry_id,
    )


async def delete_entry(entry_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM qna
        WHERE id = $1
        RETURNING *
        """,
        entry_id,
    )
