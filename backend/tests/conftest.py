from decimal import Decimal

import pytest

from bakery_pos.db.seed_demo import seed_demo_data
from bakery_pos.db.state import BakeryState
from bakery_pos.models.product import Product

from tests.helpers import NOW


@pytest.fixture
def state() -> BakeryState:
    return seed_demo_data(BakeryState(), now=NOW)


@pytest.fixture
def bun() -> Product:
    return Product(id="a", name="Bun", category="Bread", price=Decimal("50"), stock=10, min_stock=2)


@pytest.fixture
def tart() -> Product:
    return Product(id="b", name="Tart", category="Pastries", price=Decimal("30"), stock=5, min_stock=2)
