"""
Shared helpers for the resource services.

Every resource follows the same contract:
- required fields must be present and non-empty, else 400;
- a unique-constraint violation becomes 409;
- any other failure while running the statement becomes a generic 500;
- an empty result for an id-addressed statement becomes 404.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import asyncpg
from fastapi import HTTPException, status
from pydantic import BaseModel

from .logging_config import get_logger

logger = get_logger(__name__)

SERVER_ERROR_DETAIL = "Server error."

MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def require_fields(payload: BaseModel, fields: Sequence[str]) -> None:
    missing = [name for name in fields if _is_missing(getattr(payload, name, None))]
    if not missing:
        return None
    label = "field" if len(missing) == 1 else "fields"
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Missing required {label}: {', '.join(missing)}",
    )


def require_addressable(row_id: int, *, resource: str) -> None:
    # Surrogate ids are int4; anything outside that range cannot exist.
    if not MIN_ID <= row_id <= MAX_ID:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found.",
        )


def require_row(row: dict | None, *, resource: str) -> dict:
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found.",
        )
    return row


@asynccontextmanager
async def statement_guard(action: str, *, conflict_detail: str | None = None) -> AsyncIterator[None]:
    """
    Map database failures raised inside the block to HTTP errors.

    `action` names the operation in logs, e.g. "blog_create".
    """
    try:
        yield
    except asyncpg.UniqueViolationError as exc:
        logger.warning(
            f"{action}_conflict",
            constraint=getattr(exc, "constraint_name", None),
        )
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=conflict_detail or "Resource already exists.",
        ) from exc
    except Exception as exc:
        logger.exception(f"{action}_failed", error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=SERVER_ERROR_DETAIL,
        ) from exc
