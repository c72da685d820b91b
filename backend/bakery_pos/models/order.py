"""Line items, sales and bulk orders."""

import enum
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from bakery_pos.models.mixins import new_id, utcnow


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"


class BulkOrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class LineItem(BaseModel):
    """One product in a cart or order, with the name and price captured when added."""
    model_config = ConfigDict(frozen=True)

    item_id: str
    item_name: str
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0)

    @computed_field
    @property
    def total(self) -> Decimal:
        return self.price * self.quantity


class Customer(BaseModel):
    name: str | None = None
    phone: str | None = None


class Sale(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    items: tuple[LineItem, ...]
    total: Decimal
    discount: Decimal = Decimal("0")
    # Not floored at zero: a discount above the subtotal gives a negative total.
    final_total: Decimal
    payment_method: PaymentMethod
    staff_id: str
    staff_name: str
    customer_name: str | None = None
    customer_phone: str | None = None
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)

    def __repr__(self) -> str:
        return f"<Sale {self.id} final_total={self.final_total}>"


class BulkOrder(BaseModel):
    """Catering / party order. Only ``status`` may change after creation."""
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, frozen=True)
    customer_name: str = Field(..., frozen=True)
    customer_phone: str = Field(..., frozen=True)
    items: tuple[LineItem, ...] = Field(..., frozen=True)
    total: Decimal = Field(..., frozen=True)
    advance_paid: Decimal = Field(default=Decimal("0"), frozen=True)
    delivery_date: date = Field(..., frozen=True)
    notes: str | None = Field(default=None, frozen=True)
    created_at: datetime = Field(default_factory=utcnow, frozen=True)
    status: BulkOrderStatus = BulkOrderStatus.PENDING

    @computed_field
    @property
    def balance_amount(self) -> Decimal:
        return self.total - self.advance_paid

    def __repr__(self) -> str:
        return f"<BulkOrder {self.id} {self.customer_name} status={self.status.value}>"
