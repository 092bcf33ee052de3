"""
Base for request bodies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Payload(BaseModel):
    # Text columns accept JSON numbers (phone numbers, pincodes, ...) as the
    # database would; only presence is checked beyond that.
    model_config = ConfigDict(coerce_numbers_to_str=True)
