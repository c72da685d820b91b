"""Bakery item catalogue and stock levels."""

import logging
from decimal import Decimal

from bakery_pos.core.exceptions import MissingFieldsError, NotFoundError
from bakery_pos.models.mixins import utcnow
from bakery_pos.models.product import Product

logger = logging.getLogger(__name__)

_DERIVED_FIELDS = {"is_low_stock", "stock_status"}


class Inventory:
    def __init__(self, products=()) -> None:
        self._products: list[Product] = list(products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self):
        return iter(self._products)

    def all(self) -> list[Product]:
        return list(self._products)

    def get(self, item_id: str) -> Product:
        for product in self._products:
            if product.id == item_id:
                return product
        raise NotFoundError("Item not found")

    def add_item(
        self,
        name: str | None,
        category: str | None,
        price: Decimal | None,
        stock: int = 0,
        min_stock: int = 0,
        description: str = "",
        image: str | None = None,
    ) -> Product:
        if not name or not category or not price:
            raise MissingFieldsError("Please fill in all required fields")
        product = Product(
            name=name,
            category=category,
            price=price,
            stock=stock or 0,
            min_stock=min_stock or 0,
            description=description or "",
            image=image,
        )
        self._products.append(product)
        logger.info("Item %s added to inventory", product.name)
        return product

    def edit_item(self, item_id: str, **changes) -> Product:
        """Overwrite the given fields. Raises pydantic.ValidationError on bad values."""
        current = self.get(item_id)
        data = current.model_dump(exclude=_DERIVED_FIELDS)
        data.update(changes)
        data["id"] = current.id
        data["updated_at"] = utcnow()
        updated = Product.model_validate(data)
        self._products[self._products.index(current)] = updated
        logger.info("Item %s updated", updated.name)
        return updated

    def update_stock(self, item_id: str, stock: int) -> Product:
        return self.edit_item(item_id, stock=stock)

    def delete_item(self, item_id: str) -> Product:
        product = self.get(item_id)
        self._products.remove(product)
        logger.info("Item %s removed from inventory", product.name)
        return product

    def filter(self, search: str = "", category: str = "all") -> list[Product]:
        needle = search.lower()
        return [
            p for p in self._products
            if (needle in p.name.lower() or needle in p.category.lower())
            and (category == "all" or p.category == category)
        ]

    def low_stock(self) -> list[Product]:
        return [p for p in self._products if p.is_low_stock]

    def stock_value(self) -> Decimal:
        return sum((p.price * p.stock for p in self._products), Decimal("0"))

    def category_count(self) -> int:
        return len({p.category for p in self._products})
