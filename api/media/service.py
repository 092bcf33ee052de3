"""
Media request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import MediaPayload

RESOURCE = "Media entry"
REQUIRED_FIELDS = ("url",)


async def list_media() -> list[dict]:
    async with crud.statement_guard("media_list"):
        return await repository.list_media()


async def get_media(media_id: int) -> dict:
    crud.require_addressable(media_id, resource=RESOURCE)
    async with crud.statement_guard("media_get"):
        row = await repository.get_media(media_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_media(payload: MediaPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("media_create", conflict_detail="Media entry already exists."):
        row = await repository.create_media(payload)
    if row is None:
        raise RuntimeError("Failed to create media entry.")
    return row


async def update_media(media_id: int, payload: MediaPayload) -> dict:
    crud.require_addressable(media_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("media_update", conflict_detail="Media entry already exists."):
        row = await repository.update_media(media_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_media(media_id: int) -> dict:
    crud.require_addressable(media_id, resource=RESOURCE)
    async with crud.statement_guard("media_delete"):
        row = await repository.delete_media(media_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Media entry deleted successfully.", "deleted_media": deleted}
