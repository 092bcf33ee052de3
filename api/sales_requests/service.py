"""
Demo/order request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import SalesRequestPayload, SalesRequestUpdate

RESOURCE = "Request"
REQUIRED_FIELDS = ("request_type", "full_name", "email", "phone_number")


async def list_requests() -> list[dict]:
    async with crud.statement_guard("request_list"):
        return await repository.list_requests()


async def get_request(request_id: int) -> dict:
    crud.require_addressable(request_id, resource=RESOURCE)
    async with crud.statement_guard("request_get"):
        row = await repository.get_request(request_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_request(payload: SalesRequestPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("request_create", conflict_detail="Request already exists."):
        row = await repository.create_request(payload)
    if row is None:
        raise RuntimeError("Failed to create request.")
    return row


async def update_request(request_id: int, payload: SalesRequestUpdate) -> dict:
    crud.require_addressable(request_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard("request_update", conflict_detail="Request already exists."):
        row = await repository.update_request(request_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_request(request_id: int) -> dict:
    crud.require_addressable(request_id, resource=RESOURCE)
    async with crud.statement_guard("request_delete"):
        row = await repository.delete_request(request_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Request deleted successfully.", "deleted_request": deleted}
