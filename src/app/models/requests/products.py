from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from app.models.schema import Product

from .serde_base import SerdeBase


class CreateProductRequest(SerdeBase):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(..., ge=0, max_digits=19, decimal_places=2)
    stock: int = Field(default=0, ge=0)


class UpdateProductRequest(SerdeBase):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal | None = Field(default=None, ge=0, max_digits=19, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)
    available: bool | None = None


class UpdateStockRequest(SerdeBase):
    quantity: int  # signed delta applied to the current stock


class ProductResponse(SerdeBase):
    id: UUID
    name: str
    description: str | None
    price: Decimal
    stock: int
    available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls.model_validate(product)
