"""Sales ledger and checkout."""

import logging
from decimal import Decimal

from bakery_pos.core.exceptions import EmptyCartError, NotFoundError
from bakery_pos.models.account import Account
from bakery_pos.models.order import Customer, PaymentMethod, Sale
from bakery_pos.services.cart import Cart, compute_totals

logger = logging.getLogger(__name__)


class SalesLedger:
    """Append-only list of completed sales, newest first."""

    def __init__(self, sales=()) -> None:
        self._sales: list[Sale] = list(sales)

    def __len__(self) -> int:
        return len(self._sales)

    def __iter__(self):
        return iter(self._sales)

    def all(self) -> list[Sale]:
        return list(self._sales)

    def for_staff(self, staff_id: str) -> list[Sale]:
        return [s for s in self._sales if s.staff_id == staff_id]

    def get(self, sale_id: str) -> Sale:
        for sale in self._sales:
            if sale.id == sale_id:
                return sale
        raise NotFoundError("Sale not found")

    def record(self, sale: Sale) -> Sale:
        self._sales.insert(0, sale)
        return sale

    def checkout(
        self,
        cart: Cart,
        discount: Decimal,
        payment_method: PaymentMethod,
        staff: Account,
        customer: Customer | None = None,
    ) -> Sale:
        """Freeze the cart into a Sale, prepend it and clear the cart.

        Product stock is left untouched.
        """
        if cart.is_empty():
            logger.warning("Checkout rejected for %s: empty cart", staff.email)
            raise EmptyCartError("Please add items to cart before checkout")

        totals = compute_totals(cart, discount)
        customer = customer or Customer()
        sale = Sale(
            items=cart.lines,
            total=totals.subtotal,
            discount=totals.discount,
            final_total=totals.final_total,
            payment_method=payment_method,
            staff_id=staff.id,
            staff_name=staff.name,
            customer_name=customer.name or None,
            customer_phone=customer.phone or None,
        )
        self.record(sale)
        cart.clear()
        logger.info(
            "Sale %s completed by %s: %s via %s",
            sale.id, staff.email, sale.final_total, sale.payment_method.value,
        )
        return sale
