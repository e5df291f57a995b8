from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from sqlmodel import Field, SQLModel

from app.core import uuid7


def utc_now() -> datetime:
    return datetime.now(UTC)


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: UUID = Field(
        default_factory=uuid7.generate,
        primary_key=True,
        description="Time-ordered UUIDv7 primary key",
    )
    name: str = Field(..., max_length=255, description="Product name")
    description: str | None = Field(
        default=None, max_length=1000, description="Free-form description"
    )
    price: Decimal = Field(..., max_digits=19, decimal_places=2, description="Unit price")
    stock: int = Field(default=0, description="Units in stock")
    available: bool = Field(default=True, description="Whether the product is for sale")
    created_at: datetime = Field(
        default_factory=utc_now, description="Timestamp when the product was created"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, description="Timestamp of the last update"
    )


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(
        default_factory=uuid7.generate,
        primary_key=True,
        description="Time-ordered UUIDv7 primary key",
    )
    email: str = Field(..., unique=True, index=True, description="Unique email address")
    name: str = Field(..., description="Display name")
    active: bool = Field(default=True, description="Whether the account is active")
    created_at: datetime = Field(
        default_factory=utc_now, description="Timestamp when the user was created"
    )
    updated_at: datetime = Field(
        default_factory=utc_now, description="Timestamp of the last update"
    )
