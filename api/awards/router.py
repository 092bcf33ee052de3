"""
Award API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import AwardPayload

router = APIRouter()


@router.get("/api/awards")
async def list_awards() -> list[dict]:
    return await service.list_awards()


@router.get("/api/awards/{award_id}")
async def get_award(award_id: int) -> dict:
    return await service.get_award(award_id)


@router.post("/api/awards", status_code=status.HTTP_201_CREATED)
async def create_award(payload: AwardPayload) -> dict:
    return await service.create_award(payload)


@router.put("/api/awards/{award_id}")
async def update_award(award_id: int, payload: AwardPayload) -> dict:
    return await service.update_award(award_id, payload)


@router.delete("/api/awards/{award_id}")
async def delete_award(award_id: int) -> dict:
    return await service.delete_award(award_id)
