"""
Newsletter subscription API endpoints (`/api/subscribe`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import service
from .schemas import SubscriptionPayload

router = APIRouter()


@router.get("/api/subscribe")
async def list_subscriptions() -> list[dict]:
    return await service.list_subscriptions()


@router.get("/api/subscribe/{subscription_id}")
async def get_subscription(subscription_id: int) -> dict:
    return await service.get_subscription(subscription_id)


@router.post("/api/subscribe", status_code=status.HTTP_201_CREATED)
async def create_subscription(payload: SubscriptionPayload) -> dict:
    return await service.create_subscription(payload)


@router.put("/api/subscribe/{subscription_id}")
async def update_subscription(subscription_id: int, payload: SubscriptionPayload) -> dict:
    return await service.update_subscription(subscription_id, payload)


@router.delete("/api/subscribe/{subscription_id}")
async def delete_subscription(subscription_id: int) -> dict:
    return await service.delete_subscription(subscription_id)
