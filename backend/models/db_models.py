# models/db_models.py
from datetime import datetime, UTC
from typing import Optional, List
from decimal import Decimal

from sqlalchemy import Column, JSON, Text, DECIMAL
from sqlmodel import SQLModel, Field, Relationship, UniqueConstraint

class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    slug: str = Field(index=True, unique=True)
    brand: str = Field(index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    category: Optional[str] = Field(default=None, index=True)  # designer, niche, fresh, oriental
    gender: Optional[str] = Field(default=None, index=True)  # masculine, feminine, unisex
    in_stock: bool = Field(default=True, index=True)
    price_2ml: Optional[Decimal] = Field(default=None, sa_column=Column(DECIMAL(10, 2)))
    price_5ml: Optional[Decimal] = Field(default=None, sa_column=Column(DECIMAL(10, 2)))
    price_10ml: Optional[Decimal] = Field(default=None, sa_column=Column(DECIMAL(10, 2)))
    top_notes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    middle_notes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    base_notes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    image_url: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    inventory: List["Inventory"] = Relationship(
        back_populates="product",
        cascade_delete=True,
        sa_relationship_kwargs={"order_by": "Inventory.id"},
    )
    reviews: List["Review"] = Relationship(back_populates="product", cascade_delete=True)

class Inventory(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    bottle_size_ml: int
    total_volume: Decimal = Field(sa_column=Column(DECIMAL(10, 2)), default=Decimal("0.00"))
    used_volume: Decimal = Field(sa_column=Column(DECIMAL(10, 2)), default=Decimal("0.00"))
    low_stock_alert: bool = Field(default=False)
    cost_per_ml: Optional[Decimal] = Field(default=None, sa_column=Column(DECIMAL(10, 4)))
    supplier: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    product_id: int = Field(foreign_key="product.id")

    product: Optional[Product] = Relationship(back_populates="inventory")

    __table_args__ = (UniqueConstraint("product_id", "bottle_size_ml"),)

class Review(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    rating: int = Field(ge=1, le=5)
    author_name: Optional[str] = Field(default=None)
    comment: Optional[str] = Field(default=None, sa_column=Column(Text))
    is_published: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    product_id: int = Field(foreign_key="product.id")

    product: Optional[Product] = Relationship(back_populates="reviews")
