"""Inventory schemas for request/response."""

from decimal import Decimal

from pydantic import BaseModel, Field

from bakery_pos.models.product import Product


class ItemCreate(BaseModel):
    name: str | None = None
    category: str | None = None
    price: Decimal | None = Field(None, ge=0, decimal_places=2)
    stock: int = Field(0, ge=0)
    min_stock: int = Field(0, ge=0)
    description: str = ""
    image: str | None = None


class ItemUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    category: str | None = Field(None, min_length=1, max_length=100)
    price: Decimal | None = Field(None, ge=0, decimal_places=2)
    stock: int | None = Field(None, ge=0)
    min_stock: int | None = Field(None, ge=0)
    description: str | None = None
    image: str | None = None


class StockUpdate(BaseModel):
    stock: int = Field(..., ge=0)


class InventoryListResponse(BaseModel):
    items: list[Product]
    total_items: int
    low_stock_count: int
    stock_value: Decimal
    category_count: int


class LowStockResponse(BaseModel):
    items: list[Product]
    count: int
