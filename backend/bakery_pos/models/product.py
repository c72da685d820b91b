"""Bakery item (product) model."""

import enum
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from bakery_pos.models.mixins import new_id, utcnow

CATEGORIES = ("Bread", "Cakes", "Pastries", "Cookies", "Muffins", "Donuts", "Other")


class StockStatus(str, enum.Enum):
    OUT = "out"
    LOW = "low"
    GOOD = "good"


class Product(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0, decimal_places=2)
    stock: int = Field(default=0, ge=0)
    min_stock: int = Field(default=0, ge=0, description="Reorder threshold")
    description: str = ""
    image: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field
    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    @computed_field
    @property
    def stock_status(self) -> StockStatus:
        if self.stock == 0:
            return StockStatus.OUT
        if self.stock <= self.min_stock:
            return StockStatus.LOW
        return StockStatus.GOOD

    def __repr__(self) -> str:
        return f"<Product {self.name} stock={self.stock}>"
