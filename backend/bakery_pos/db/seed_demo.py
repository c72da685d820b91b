"""Seed demo accounts, catalogue, sales and bulk orders.

Demo sign-in: the password of each account is its role name
(admin@bakery.com / admin, manager@bakery.com / manager, staff@bakery.com / staff).
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from bakery_pos.db.state import BakeryState
from bakery_pos.models.account import Account
from bakery_pos.models.company import Company
from bakery_pos.models.order import BulkOrder, BulkOrderStatus, LineItem, PaymentMethod, Sale
from bakery_pos.models.product import Product
from bakery_pos.models.role import Role
from bakery_pos.services.bulk_orders import BulkOrderLedger
from bakery_pos.services.company import CompanySettings
from bakery_pos.services.inventory import Inventory
from bakery_pos.services.sales import SalesLedger

logger = logging.getLogger(__name__)

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)

DEMO_ACCOUNTS = [
    ("1", "John Admin", "admin@bakery.com", Role.ADMIN),
    ("2", "Sarah Manager", "manager@bakery.com", Role.MANAGER),
    ("3", "Mike Staff", "staff@bakery.com", Role.STAFF),
]

# id, name, category, price, stock, min_stock, description
DEMO_ITEMS = [
    ("1", "Chocolate Cake", "Cakes", "450", 12, 5, "Rich dark chocolate sponge with ganache"),
    ("2", "Croissant", "Pastries", "60", 40, 15, "Buttery, flaky French croissant"),
    ("3", "Whole Wheat Bread", "Bread", "50", 25, 10, "Freshly baked whole wheat loaf"),
    ("4", "Blueberry Muffin", "Muffins", "70", 8, 10, "Soft muffin loaded with blueberries"),
    ("5", "Chocolate Chip Cookies", "Cookies", "30", 60, 20, "Crunchy cookies with chocolate chips"),
    ("6", "Glazed Donut", "Donuts", "45", 0, 10, "Classic ring donut with sugar glaze"),
    ("7", "Red Velvet Cake", "Cakes", "550", 6, 3, "Red velvet layers with cream cheese frosting"),
    ("8", "Garlic Bread", "Bread", "80", 18, 8, "Toasted bread with garlic butter"),
]

DEMO_COMPANY = Company(
    name="Sweet Crumbs Bakery",
    address="12 MG Road, Bengaluru, Karnataka 560001",
    phone="+91 98765 43210",
    email="hello@sweetcrumbs.in",
    gst="29ABCDE1234F1Z5",
)


def _line(product: Product, quantity: int) -> LineItem:
    return LineItem(item_id=product.id, item_name=product.name, quantity=quantity, price=product.price)


def _demo_sales(items: dict[str, Product], accounts: dict[str, Account], now: datetime) -> list[Sale]:
    # (hours ago, staff id, [(item id, qty)], discount, payment, customer)
    rows = [
        (2, "3", [("2", 4), ("5", 6)], "0", PaymentMethod.CASH, ("Priya Sharma", "9876500001")),
        (5, "3", [("1", 1)], "50", PaymentMethod.UPI, (None, None)),
        (26, "2", [("3", 2), ("8", 1)], "0", PaymentMethod.CARD, ("Rahul Verma", "9876500002")),
        (50, "3", [("7", 1), ("2", 2)], "20", PaymentMethod.UPI, (None, None)),
        (75, "1", [("4", 3)], "0", PaymentMethod.CASH, (None, None)),
    ]
    sales = []
    for hours_ago, staff_id, lines, discount, method, (cust_name, cust_phone) in rows:
        staff = accounts[staff_id]
        sale_items = tuple(_line(items[item_id], qty) for item_id, qty in lines)
        total = sum((line.total for line in sale_items), Decimal("0"))
        sales.append(Sale(
            items=sale_items,
            total=total,
            discount=Decimal(discount),
            final_total=total - Decimal(discount),
            payment_method=method,
            staff_id=staff.id,
            staff_name=staff.name,
            customer_name=cust_name,
            customer_phone=cust_phone,
            created_at=now - timedelta(hours=hours_ago),
        ))
    return sales


def _demo_bulk_orders(items: dict[str, Product], now: datetime) -> list[BulkOrder]:
    birthday = (_line(items["1"], 2), _line(items["5"], 50))
    office = (_line(items["2"], 100), _line(items["4"], 40))
    return [
        BulkOrder(
            customer_name="Anita Desai",
            customer_phone="9876543210",
            items=birthday,
            total=sum((line.total for line in birthday), Decimal("0")),
            advance_paid=Decimal("1000"),
            delivery_date=now.date() + timedelta(days=3),
            notes="Birthday party, write 'Happy 8th Birthday Aarav'",
            status=BulkOrderStatus.CONFIRMED,
            created_at=now - timedelta(days=1),
        ),
        BulkOrder(
            customer_name="TechPark Pvt Ltd",
            customer_phone="8041234567",
            items=office,
            total=sum((line.total for line in office), Decimal("0")),
            advance_paid=Decimal("5000"),
            delivery_date=now.date() + timedelta(days=7),
            notes="Deliver to reception before 9 AM",
            created_at=now - timedelta(days=2),
        ),
    ]


def seed_demo_data(state: BakeryState, now: datetime | None = None) -> BakeryState:
    now = now or datetime.now(timezone.utc)

    accounts = {}
    for account_id, name, email, role in DEMO_ACCOUNTS:
        account = Account(id=account_id, name=name, email=email, role=role, created_at=CREATED)
        accounts[account_id] = state.accounts.add(account, password=role.value)

    items = {
        item_id: Product(
            id=item_id,
            name=name,
            category=category,
            price=Decimal(price),
            stock=stock,
            min_stock=min_stock,
            description=description,
            created_at=CREATED,
            updated_at=CREATED,
        )
        for item_id, name, category, price, stock, min_stock, description in DEMO_ITEMS
    }

    state.inventory = Inventory(items.values())
    state.sales = SalesLedger(_demo_sales(items, accounts, now))
    state.bulk_orders = BulkOrderLedger(_demo_bulk_orders(items, now))
    state.company = CompanySettings(DEMO_COMPANY.model_copy())

    logger.info(
        "Seeded %d accounts, %d items, %d sales, %d bulk orders",
        len(state.accounts), len(state.inventory), len(state.sales), len(state.bulk_orders),
    )
    return state
