"""
Demo and order request API endpoints (`/api/requests`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import SalesRequestPayload, SalesRequestUpdate

router = APIRouter()


@router.get("/api/requests")
async def list_requests() -> list[dict]:
    """
    All demo and order requests, most recent first.
    """
    return await service.list_requests()


@router.get("/api/requests/{request_id}")
async def get_request(request_id: int) -> dict:
    return await service.get_request(request_id)


@router.post("/api/requests", status_code=status.HTTP_201_CREATED)
async def create_request(payload: SalesRequestPayload) -> dict:
    return await service.create_request(payload)


@router.put("/api/requests/{request_id}")
async def update_request(request_id: int, payload: SalesRequestUpdate) -> dict:
    return await service.update_request(request_id, payload)


@router.delete("/api/requests/{request_id}")
async def delete_request(request_id: int) -> dict:
    return await service.delete_request(request_id)
