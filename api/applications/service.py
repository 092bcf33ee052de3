"""
Job application request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import ApplicationPayload

RESOURCE = "Application"
REQUIRED_FIELDS = ("name", "email")


async def list_applications() -> list[dict]:
    async with crud.statement_guard("application_list"):
        return await repository.list_applications()


async def get_application(application_id: int) -> dict:
    crud.require_addressable(application_id, resource=RESOURCE)
    async with crud.statement_guard("application_get"):
        row = await repository.get_application(application_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_application(payload: ApplicationPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("application_create", conflict_detail="Application already exists."):
        row = await repository.create_application(payload)
    if row is None:
        raise RuntimeError("Failed to create application.")
    return row


async def update_application(application_id: int, payload: ApplicationPayload) -> dict:
    crud.require_addressable(application_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("application_update", conflict_detail="Application already exists."):
        row = await repository.update_application(application_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_application(application_id: int) -> dict:
    crud.require_addressable(application_id, resource=RESOURCE)
    async with crud.statement_guard("application_delete"):
        row = await repository.delete_application(application_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Application deleted successfully.", "deleted_application": deleted}
