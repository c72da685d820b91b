"""Cart, checkout and bulk order schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from bakery_pos.models.order import BulkOrder, BulkOrderStatus, LineItem, PaymentMethod, Sale


class CartLineAdd(BaseModel):
    item_id: str
    quantity: int = Field(1, gt=0)


class CartLineUpdate(BaseModel):
    quantity: int = Field(..., ge=0)


class CartResponse(BaseModel):
    items: list[LineItem]
    item_count: int
    subtotal: Decimal
    discount: Decimal = Decimal("0")
    final_total: Decimal


class CheckoutRequest(BaseModel):
    discount: Decimal = Field(default=Decimal("0"), ge=0)
    payment_method: PaymentMethod = PaymentMethod.CASH
    customer_name: str | None = None
    customer_phone: str | None = None


class SaleListResponse(BaseModel):
    items: list[Sale]
    total: int


class DraftResponse(BaseModel):
    items: list[LineItem]
    total: Decimal


class BulkOrderCreate(BaseModel):
    customer_name: str | None = None
    customer_phone: str | None = None
    delivery_date: date | None = None
    advance_paid: Decimal = Field(default=Decimal("0"), ge=0)
    notes: str | None = None


class BulkOrderStatusUpdate(BaseModel):
    status: BulkOrderStatus


class BulkOrderListResponse(BaseModel):
    items: list[BulkOrder]
    total: int
