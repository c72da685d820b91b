"""Unit tests for inventory management."""

from decimal import Decimal

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from bakery_pos.api import inventory as inventory_api
from bakery_pos.core.deps import require_any_permission
from bakery_pos.core.exceptions import MissingFieldsError, NotFoundError
from bakery_pos.models.product import Product, StockStatus
from bakery_pos.models.role import Permission
from bakery_pos.schemas.inventory import ItemCreate, ItemUpdate, StockUpdate

from tests.helpers import sign_in


# ── Product properties ────────────────────────────

def test_stock_status():
    item = Product(name="Bun", category="Bread", price=Decimal("20"), stock=0, min_stock=5)
    assert item.stock_status == StockStatus.OUT
    item.stock = 5  # exactly at threshold
    assert item.stock_status == StockStatus.LOW
    assert item.is_low_stock is True
    item.stock = 6
    assert item.stock_status == StockStatus.GOOD


# ── Catalogue operations ──────────────────────────

def test_add_item_defaults(state):
    item = state.inventory.add_item("Rusk", "Bread", Decimal("40"))
    assert item.stock == 0
    assert item.min_stock == 0
    assert state.inventory.all()[-1] is item


@pytest.mark.parametrize(
    "name, category, price",
    [("", "Bread", Decimal("40")), ("Rusk", None, Decimal("40")), ("Rusk", "Bread", Decimal("0"))],
)
def test_add_item_requires_fields(state, name, category, price):
    size = len(state.inventory)
    with pytest.raises(MissingFieldsError):
        state.inventory.add_item(name, category, price)
    assert len(state.inventory) == size


def test_edit_item_bumps_updated_at(state):
    before = state.inventory.get("2")
    after = state.inventory.edit_item("2", price=Decimal("65"))
    assert after.price == Decimal("65")
    assert after.id == "2"
    assert after.updated_at > before.updated_at
    assert state.inventory.get("2") is after


def test_update_stock_rejects_negative(state):
    with pytest.raises(ValidationError):
        state.inventory.update_stock("2", -1)
    assert state.inventory.get("2").stock == 40


def test_delete_item(state):
    state.inventory.delete_item("8")
    with pytest.raises(NotFoundError):
        state.inventory.get("8")


def test_filters_and_summaries(state):
    inventory = state.inventory
    assert {p.name for p in inventory.filter("cake")} == {"Chocolate Cake", "Red Velvet Cake"}
    assert {p.name for p in inventory.filter("", "Bread")} == {"Whole Wheat Bread", "Garlic Bread"}
    assert {p.name for p in inventory.low_stock()} == {"Blueberry Muffin", "Glazed Donut"}
    assert inventory.category_count() == 6
    # 450*12 + 60*40 + 50*25 + 70*8 + 30*60 + 0 + 550*6 + 80*18
    assert inventory.stock_value() == Decimal("16150")


# ── Endpoints ─────────────────────────────────────

@pytest.mark.asyncio
async def test_list_items_summary(state):
    _, session = await sign_in(state, "manager")
    result = await inventory_api.list_items(search="", category="all", session=session, state=state)
    assert result.total_items == 8
    assert result.low_stock_count == 2


@pytest.mark.asyncio
async def test_staff_can_view_but_not_edit(state):
    _, session = await sign_in(state, "staff")
    assert await require_any_permission(Permission.MANAGE_ITEMS, Permission.VIEW_STOCK)(session=session)
    with pytest.raises(HTTPException) as exc_info:
        await inventory_api.can_manage(session=session)
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_create_item_missing_fields_returns_400(state):
    _, session = await sign_in(state, "manager")
    with pytest.raises(HTTPException) as exc_info:
        await inventory_api.create_item(ItemCreate(name="Rusk"), session=session, state=state)
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_update_item_and_stock(state):
    _, session = await sign_in(state, "admin")
    item = await inventory_api.update_item("4", ItemUpdate(min_stock=2), session=session, state=state)
    assert item.stock_status == StockStatus.GOOD

    item = await inventory_api.update_stock("4", StockUpdate(stock=0), session=session, state=state)
    assert item.stock_status == StockStatus.OUT


@pytest.mark.asyncio
async def test_get_missing_item_returns_404(state):
    _, session = await sign_in(state, "manager")
    with pytest.raises(HTTPException) as exc_info:
        await inventory_api.get_item("nope", session=session, state=state)
    assert exc_info.value.status_code == 404
