"""
Media API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import MediaPayload

router = APIRouter()


@router.get("/api/media")
async def list_media() -> list[dict]:
    return await service.list_media()


@router.get("/api/media/{media_id}")
async def get_media(media_id: int) -> dict:
    return await service.get_media(media_id)


@router.post("/api/media", status_code=status.HTTP_201_CREATED)
async def create_media(payload: MediaPayload) -> dict:
    return await service.create_media(payload)


@router.put("/api/media/{media_id}")
async def update_media(media_id: int, payload: MediaPayload) -> dict:
    return await service.update_media(media_id, payload)


@router.delete("/api/media/{media_id}")
async def delete_media(media_id: int) -> dict:
    return await service.delete_media(media_id)
