"""
Pydantic schemas for newsletter subscription endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class SubscriptionPayload(Payload):
    email: str | None = None
