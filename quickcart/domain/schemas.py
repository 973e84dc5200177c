# quickcart/domain/schemas.py
from pydantic import BaseModel, Field, field_serializer
from typing import Any, List
from datetime import datetime, timezone


def to_iso(value: datetime) -> str:
    """Format jak w JS toISOString: UTC, milisekundy, sufiks Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CartItem(BaseModel):
    """Pozycja koszyka po normalizacji do liczb."""

    product_id: int | float
    quantity: int | float = Field(..., gt=0)


class Cart(BaseModel):
    """Rekord koszyka zapisywany w carts.json."""

    cart_id: str
    customer_id: str
    items: List[CartItem]
    status: str
    created_at: datetime
    updated_at: datetime
    expires_at: datetime

    @field_serializer("created_at", "updated_at", "expires_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_iso(value)


class ItemError(BaseModel):
    """Blad walidacji jednej pozycji (index w items z requestu)."""

    index: int
    reason: str
    product_id: int | float | None = None


class CartSubmitResult(BaseModel):
    created: bool
    cart_id: str
    status: str
    message: str


class CartSubmitOut(BaseModel):
    success: bool = True
    cart_id: str
    status: str
    message: str


class CartsOut(BaseModel):
    success: bool = True
    total: int
    carts: List[Cart]


class ProductsOut(BaseModel):
    success: bool = True
    total: int
    products: List[dict[str, Any]]


class ProductOut(BaseModel):
    success: bool = True
    product: dict[str, Any]


class ErrorOut(BaseModel):
    """Koperta bledu (response)."""

    success: bool = False
    error: str
    details: List[ItemError] | None = None
