"""
Blog request handling: presence checks and database error mapping.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import BlogPayload

RESOURCE = "Blog"
REQUIRED_FIELDS = ("title", "slug", "content", "author")
SLUG_CONFLICT = "Blog with this slug already exists."


async def list_blogs() -> list[dict]:
    async with crud.statement_guard("blog_list"):
        return await repository.list_blogs()


async def get_blog(blog_id: int) -> dict:
    crud.require_addressable(blog_id, resource=RESOURCE)
    async with crud.statement_guard("blog_get"):
        row = await repository.get_blog(blog_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_blog(payload: BlogPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("blog_create", conflict_detail=SLUG_CONFLICT):
        row = await repository.create_blog(payload)
    if row is None:
        raise RuntimeError("Failed to create blog.")
    return row


async def update_blog(blog_id: int, payload: BlogPayload) -> dict:
    crud.require_addressable(blog_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("blog_update", conflict_detail=SLUG_CONFLICT):
        row = await repository.update_blog(blog_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_blog(blog_id: int) -> dict:
    crud.require_addressable(blog_id, resource=RESOURCE)
    async with crud.statement_guard("blog_delete"):
        row = await repository.delete_blog(blog_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Blog deleted successfully.", "deleted_blog": deleted}
