"""
Q&A request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import QnaPayload

RESOURCE = "Q&A entry"
REQUIRED_FIELDS = ("question", "answer")


async def list_entries() -> list[dict]:
    async with crud.statement_guard("qna_list"):
        return await repository.list_entries()


async def get_entry(entry_id: int) -> dict:
    crud.require_addressable(entry_id, resource=RESOURCE)
    async with crud.statement_guard("qna_get"):
        row = await repository.get_entry(entry_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_entry(payload: QnaPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("qna_create", conflict_detail="Q&A entry already exists."):
        row = await repository.create_entry(payload)
    if row is None:
        raise RuntimeError("Failed to create Q&A entry.")
    return row


async def update_entry(entry_id: int, payload: QnaPayload) -> dict:
    crud.require_addressable(entry_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("qna_update", conflict_detail="Q&A entry already exists."):
        row = await repository.update_entry(entry_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_entry(entry_id: int) -> dict:
    crud.require_addressable(entry_id, resource=RESOURCE)
    async with crud.statement_guard("qna_delete"):
        row = await repository.delete_entry(entry_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Q&A entry deleted successfully.", "deleted_qna": deleted}
