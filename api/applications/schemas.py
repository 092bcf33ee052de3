"""
Pydantic schemas for job application endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class ApplicationPayload(Payload):
    name: str | None = None
    email: str | None = None
    position: str | None = None
