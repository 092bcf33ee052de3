"""
Newsletter subscription request handling.
"""

from __future__ import annotations

from core import crud

from . import repository
from .schemas import SubscriptionPayload

RESOURCE = "Subscription"
REQUIRED_FIELDS = ("email",)


async def list_subscriptions() -> list[dict]:
    async with crud.statement_guard("subscription_list"):
        return await repository.list_subscriptions()


async def get_subscription(subscription_id: int) -> dict:
    crud.require_addressable(subscription_id, resource=RESOURCE)
    async with crud.statement_guard("subscription_get"):
        row = await repository.get_subscription(subscription_id)
    return crud.require_row(row, resource=RESOURCE)


async def create_subscription(payload: SubscriptionPayload) -> dict:
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard(
        "subscription_create",
        conflict_detail="This email is already subscribed.",
    ):
        row = await repository.create_subscription(payload)
    if row is None:
        raise RuntimeError("Failed to create subscription.")
    return row


async def update_subscription(subscription_id: int, payload: SubscriptionPayload) -> dict:
    crud.require_addressable(subscription_id, resource=RESOURCE)
    crud.require_fields(payload, REQUIRED_FIELDS)
    async with crud.statement_guard(
        "subscription_update",
        conflict_detail="This email is already subscribed to another entry.",
    ):
        row = await repository.update_subscription(subscription_id, payload)
    return crud.require_row(row, resource=RESOURCE)


async def delete_subscription(subscription_id: int) -> dict:
    crud.require_addressable(subscription_id, resource=RESOURCE)
    async with crud.statement_guard("subscription_delete"):
        row = await repository.delete_subscription(subscription_id)
    deleted = crud.require_row(row, resource=RESOURCE)
    return {"message": "Subscription deleted successfully.", "deleted_subscription": deleted}
