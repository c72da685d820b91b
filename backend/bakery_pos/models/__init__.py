"""Domain models for the bakery POS."""

from bakery_pos.models.role import Role, Permission
from bakery_pos.models.account import Account
from bakery_pos.models.company import Company
from bakery_pos.models.product import Product, StockStatus, CATEGORIES
from bakery_pos.models.order import (
    LineItem,
    Customer,
    Sale,
    PaymentMethod,
    BulkOrder,
    BulkOrderStatus,
)

__all__ = [
    "Role",
    "Permission",
    "Account",
    "Company",
    "Product",
    "StockStatus",
    "CATEGORIES",
    "LineItem",
    "Customer",
    "Sale",
    "PaymentMethod",
    "BulkOrder",
    "BulkOrderStatus",
]
