"""
Pydantic schemas for blog endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class BlogPayload(Payload):
    # Presence of required fields is checked by the service so a missing
    # field is reported as 400 rather than a schema error.
    title: str | None = None
    slug: str | None = None
    content: str | None = None
    author: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    tags: list[str] | None = None
