"""
Pydantic schemas for Q&A endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class QnaPayload(Payload):
    question: str | None = None
    answer: str | None = None
