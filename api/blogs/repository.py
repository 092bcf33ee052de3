"""
Blog persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import BlogPayload


async def list_blogs() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM blogs
        ORDER BY publication_date DESC
        """
    )


async def get_blog(blog_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM blogs
        WHERE id = $1
        """,
        blog_id,
    )


async def create_blog(payload: BlogPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO blogs (title, slug, content, author, image_url, video_url, tags)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        payload.title,
        payload.slug,
        payload.content,
        payload.author,
        payload.image_url,
        payload.video_url,
        payload.tags,
    )


async def update_blog(blog_id: int, payload: BlogPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE blogs
        SET title = $1,
            slug = $2,
            content = $3,
            author = $4,
            image_url = $5,
            video_url = $6,
            tags = $7
        WHERE id = $8
        RETURNING *
        """,
        payload.title,
        payload.slug,
        payload.content,
        payload.author,
        payload.image_url,
        payload.video_url,
        payload.tags,
        blog_id,
    )


async def delete_blog(blog_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM blogs
        WHERE id = $1
        RETURNING *
        """,
        blog_id,
    )
