"""Bulk (catering) orders: item picker and ledger."""

import logging
from datetime import date
from decimal import Decimal

from bakery_pos.core.exceptions import InvalidQuantityError, MissingFieldsError, NotFoundError
from bakery_pos.models.order import BulkOrder, BulkOrderStatus, LineItem
from bakery_pos.models.product import Product

logger = logging.getLogger(__name__)


class BulkOrderDraft:
    """Items picked for a bulk order that has not been created yet.

    Bulk orders are baked to order, so quantities are not bounded by stock.
    """

    def __init__(self) -> None:
        self._items: list[LineItem] = []

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> Decimal:
        return sum((item.total for item in self._items), Decimal("0"))

    def add_item(self, product: Product, quantity: int = 1) -> LineItem:
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be at least 1")
        for idx, item in enumerate(self._items):
            if item.item_id == product.id:
                updated = item.model_copy(update={"quantity": item.quantity + quantity})
                self._items[idx] = updated
                return updated
        item = LineItem(
            item_id=product.id,
            item_name=product.name,
            quantity=quantity,
            price=product.price,
        )
        self._items.append(item)
        return item

    def set_quantity(self, item_id: str, quantity: int) -> LineItem | None:
        for idx, item in enumerate(self._items):
            if item.item_id != item_id:
                continue
            if quantity <= 0:
                del self._items[idx]
                return None
            updated = item.model_copy(update={"quantity": quantity})
            self._items[idx] = updated
            return updated
        return None

    def clear(self) -> None:
        self._items.clear()


class BulkOrderLedger:
    """Bulk orders, newest first."""

    def __init__(self, orders=()) -> None:
        self._orders: list[BulkOrder] = list(orders)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self):
        return iter(self._orders)

    def all(self) -> list[BulkOrder]:
        return list(self._orders)

    def get(self, order_id: str) -> BulkOrder:
        for order in self._orders:
            if order.id == order_id:
                return order
        raise NotFoundError("Bulk order not found")

    def create(
        self,
        customer_name: str | None,
        customer_phone: str | None,
        delivery_date: date | None,
        items,
        advance_paid: Decimal = Decimal("0"),
        notes: str | None = None,
    ) -> BulkOrder:
        items = tuple(items)
        if not customer_name or not customer_phone or delivery_date is None or not items:
            logger.warning("Bulk order rejected: missing required fields or items")
            raise MissingFieldsError("Please fill in all required fields and add items")

        order = BulkOrder(
            customer_name=customer_name,
            customer_phone=customer_phone,
            items=items,
            total=sum((item.total for item in items), Decimal("0")),
            advance_paid=advance_paid,
            delivery_date=delivery_date,
            notes=notes,
        )
        self._orders.insert(0, order)
        logger.info(
            "Bulk order %s created for %s: total %s, balance %s",
            order.id, order.customer_name, order.total, order.balance_amount,
        )
        return order

    def update_status(self, order_id: str, status: BulkOrderStatus) -> BulkOrder:
        """Overwrite the status. Any status may follow any other."""
        order = self.get(order_id)
        order.status = status
        logger.info("Bulk order %s status changed to %s", order.id, order.status.value)
        return order

    def filter(self, search: str = "", status: str = "all") -> list[BulkOrder]:
        needle = search.lower()
        return [
            order for order in self._orders
            if (needle in order.customer_name.lower() or search in order.customer_phone)
            and (status == "all" or order.status == status)
        ]
