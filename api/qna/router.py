"""
Q&A API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import QnaPayload

router = APIRouter()


@router.get("/api/qna")
async def list_entries() -> list[dict]:
    return await service.list_entries()


@router.get("/api/qna/{entry_id}")
async def get_entry(entry_id: int) -> dict:
    return await service.get_entry(entry_id)


@router.post("/api/qna", status_code=status.HTTP_201_CREATED)
async def create_entry(payload: QnaPayload) -> dict:
    return await service.create_entry(payload)


@router.put("/api/qna/{entry_id}")
async def update_entry(entry_id: int, payload: QnaPayload) -> dict:
    return await service.update_entry(entry_id, payload)


@router.delete("/api/qna/{entry_id}")
async def delete_entry(entry_id: int) -> dict:
    return await service.delete_entry(entry_id)
