"""
Blog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import BlogPayload

router = APIRouter()


@router.get("/api/blogs")
async def list_blogs() -> list[dict]:
    """
    All blog posts, newest publication first.
    """
    return await service.list_blogs()


@router.get("/api/blogs/{blog_id}")
async def get_blog(blog_id: int) -> dict:
    return await service.get_blog(blog_id)


@router.post("/api/blogs", status_code=status.HTTP_201_CREATED)
async def create_blog(payload: BlogPayload) -> dict:
    return await service.create_blog(payload)


@router.put("/api/blogs/{blog_id}")
async def update_blog(blog_id: int, payload: BlogPayload) -> dict:
    return await service.update_blog(blog_id, payload)


@router.delete("/api/blogs/{blog_id}")
async def delete_blog(blog_id: int) -> dict:
    return await service.delete_blog(blog_id)
