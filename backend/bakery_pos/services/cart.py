"""Checkout cart: line items bounded by current stock."""

import logging
from decimal import Decimal

from pydantic import BaseModel

from bakery_pos.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    OutOfStockError,
)
from bakery_pos.models.order import LineItem
from bakery_pos.models.product import Product

logger = logging.getLogger(__name__)


class CartTotals(BaseModel):
    subtotal: Decimal
    discount: Decimal
    final_total: Decimal


class Cart:
    """Ordered line items of one in-progress transaction.

    Lines are immutable values; every mutation replaces the affected line so a
    snapshot taken at checkout cannot change afterwards.
    """

    def __init__(self) -> None:
        self._lines: list[LineItem] = []

    @property
    def lines(self) -> tuple[LineItem, ...]:
        return tuple(self._lines)

    @property
    def subtotal(self) -> Decimal:
        return sum((line.total for line in self._lines), Decimal("0"))

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def _index_of(self, item_id: str) -> int | None:
        for idx, line in enumerate(self._lines):
            if line.item_id == item_id:
                return idx
        return None

    def get_line(self, item_id: str) -> LineItem | None:
        idx = self._index_of(item_id)
        return None if idx is None else self._lines[idx]

    def add_line(self, product: Product, quantity: int = 1) -> LineItem:
        """Add ``quantity`` of ``product``, merging with an existing line.

        Raises OutOfStockError when the product has no stock and
        InsufficientStockError when the merged quantity would exceed it.
        """
        if quantity <= 0:
            raise InvalidQuantityError("Quantity must be at least 1")

        if product.stock == 0:
            logger.warning("Rejected add of %s: out of stock", product.name)
            raise OutOfStockError(f"{product.name} is currently out of stock")

        idx = self._index_of(product.id)
        current = self._lines[idx].quantity if idx is not None else 0
        if current + quantity > product.stock:
            logger.warning(
                "Rejected add of %s: requested %d, stock %d",
                product.name, current + quantity, product.stock,
            )
            raise InsufficientStockError(f"Only {product.stock} {product.name} available")

        if idx is None:
            line = LineItem(
                item_id=product.id,
                item_name=product.name,
                quantity=quantity,
                price=product.price,
            )
            self._lines.append(line)
        else:
            line = self._lines[idx].model_copy(update={"quantity": current + quantity})
            self._lines[idx] = line
        return line

    def set_line_quantity(self, product: Product, quantity: int) -> LineItem | None:
        """Replace the quantity of the product's line; zero removes it.

        Returns the updated line, or None when the line was removed or absent.
        """
        idx = self._index_of(product.id)
        if quantity <= 0:
            if idx is not None:
                del self._lines[idx]
            return None

        if idx is None:
            return None
        if quantity > product.stock:
            logger.warning(
                "Rejected quantity %d for %s: stock %d", quantity, product.name, product.stock
            )
            raise InsufficientStockError(f"Only {product.stock} {product.name} available")

        line = self._lines[idx].model_copy(update={"quantity": quantity})
        self._lines[idx] = line
        return line

    def remove_line(self, item_id: str) -> None:
        idx = self._index_of(item_id)
        if idx is not None:
            del self._lines[idx]

    def clear(self) -> None:
        self._lines.clear()


def compute_totals(cart: Cart, discount: Decimal = Decimal("0")) -> CartTotals:
    subtotal = cart.subtotal
    # No floor: an oversized discount yields a negative final total.
    return CartTotals(subtotal=subtotal, discount=discount, final_total=subtotal - discount)
