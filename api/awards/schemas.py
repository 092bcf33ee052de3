"""
Pydantic schemas for award endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class AwardPayload(Payload):
    image_url: str | None = None
