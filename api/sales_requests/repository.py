"""
Demo/order request persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import SalesRequestPayload, SalesRequestUpdate


def _contact_args(payload: SalesRequestPayload) -> tuple[Any, ...]:
    return (
        payload.request_type,
        payload.product_name,
        payload.full_name,
        payload.email,
        payload.phone_number,
        payload.company_name,
        payload.address,
        payload.country,
        payload.state,
        payload.city,
        payload.pincode,
        payload.aadhar_number,
        payload.pan_number,
        payload.message,
        payload.quantity,
    )


async def list_requests() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM requests
        ORDER BY request_date DESC
        """
    )


async def get_request(request_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM requests
        WHERE id = $1
        """,
        request_id,
    )


async def create_request(payload: SalesRequestPayload) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO requests (
            request_type, product_name, full_name, email, phone_number,
            company_name, address, country, state, city, pincode,
            aadhar_number, pan_number, message, quantity
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15)
        RETURNING *
        """,
        *_contact_args(payload),
    )


async def update_request(request_id: int, payload: SalesRequestUpdate) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE requests
        SET request_type = $1,
            product_name = $2,
            full_name = $3,
            email = $4,
            phone_number = $5,
            company_name = $6,
            address = $7,
            country = $8,
            state = $9,
            city = $10,
            pincode = $11,
            aadhar_number = $12,
            pan_number = $13,
            message = $14,
            quantity = $15,
            status = COALESCE($16, status)
        WHERE id = $17
        RETURNING *
        """,
        *_contact_args(payload),
        payload.status,
        request_id,
    )


async def delete_request(request_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM requests
        WHERE id = $1
        RETURNING *
        """,
        request_id,
    )
