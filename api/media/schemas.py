"""
Pydantic schemas for media endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class MediaPayload(Payload):
    url: str | None = None
