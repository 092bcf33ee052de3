"""
Award request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import AwardPayload

RESOURCE = "Award"
REQUIRED_FIELDS = ("image_url",)


async def list_awards() -> list[dict]:
    async with crud.statement_guard("award_list"):
        return await repository.list_awards()


async def get_award(award_id: int) -> dict:
    crud.require_addressable(award_id, resource=RESOURCE)
    async with crud.statement_guard("award_get"):
        row = await repository.get_award(award_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_award(payload: AwardPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("award_create", conflict_detail="Award already exists."):
        row = await repository.create_award(payload)
    if row is None:
        raise RuntimeError("Failed to create award.")
    return row


async def update_award(award_id: int, payload: AwardPayload) -> dict:
    crud.require_addressable(award_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("award_update", conflict_detail="Award already exists."):
        row = await repository.update_award(award_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_award(award_id: int) -> dict:
    crud.require_addressable(award_id, resource=RESOURCE)
    async with crud.statement_guard("award_delete"):
        row = await repository.delete_award(award_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Award deleted successfully.", "deleted_award": deleted}
