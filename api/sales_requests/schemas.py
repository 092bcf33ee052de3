"""
Pydantic schemas for demo/order request endpoints.
"""

from __future__ import annotations

from core.schemas import Payload


class SalesRequestPayload(Payload):
    # "demo" or "order"; not constrained beyond presence.
    request_type: str | None = None
    # Free-text product reference, not linked to the products table.
    product_name: str | None = None
    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    company_name: str | None = None
    address: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    pincode: str | None = None
    aadhar_number: str | None = None
    pan_number: str | None = None
    message: str | None = None
    quantity: int | None = None


class SalesRequestUpdate(SalesRequestPayload):
    """
    Update body; `status` is only settable here. Omitted keeps the stored value.
    """

    status: str | None = None
