"""
Job application API endpoints (`/api/apply`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import ApplicationPayload

router = APIRouter()


@router.get("/api/apply")
async def list_applications() -> list[dict]:
    return await service.list_applications()


@router.get("/api/apply/{application_id}")
async def get_application(application_id: int) -> dict:
    return await service.get_application(application_id)


@router.post("/api/apply", status_code=status.HTTP_201_CREATED)
async def create_application(payload: ApplicationPayload) -> dict:
    return await service.create_application(payload)


@router.put("/api/apply/{application_id}")
async def update_application(application_id: int, payload: ApplicationPayload) -> dict:
    return await service.update_application(application_id, payload)


@router.delete("/api/apply/{application_id}")
async def delete_application(application_id: int) -> dict:
    return await service.delete_application(application_id)
