"""
Pydantic schemas for product endpoints.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core.schemas import Payload


class ProductPayload(Payload):
    name: str | None = None
    tagline: str | None = None
    description: str | None = None
    price: Decimal | None = None
    main_image_url: str | None = None
    image_urls: list[str] | None = None
    video_url: str | None = None
    category: str | None = None
    features_text: str | None = None
    tco_savings_text: str | None = None
    tco_savings_image_url: str | None = None
    # Free-form spec sheet, stored as jsonb.
    specifications: Any = None
    # Loose references to other products; not enforced by the database.
    related_products_ids: list[int] | None = None
