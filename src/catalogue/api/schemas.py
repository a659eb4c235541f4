"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# --- Product Request Schemas ---


class ProductRequest(BaseModel):
    """Admin product form. Field rules are enforced by the catalogue itself."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Organic Red Rice",
                    "category": "Grains",
                    "price": 120,
                    "stock": 40,
                }
            ]
        }
    }

    name: Any = None
    category: Any = None
    price: Any = None
    stock: Any = None


# --- Product Response Schemas ---


class ProductResponse(BaseModel):
    product_id: int
    name: str
    category: str
    price_per_unit: int
    stock_quantity: int
