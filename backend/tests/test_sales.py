"""Unit tests for checkout, the sales ledger and sales endpoints."""

from decimal import Decimal

import pytest
from fastapi import HTTPException

from bakery_pos.api import sales as sales_api
from bakery_pos.core.exceptions import EmptyCartError
from bakery_pos.models.account import Account
from bakery_pos.models.order import Customer, PaymentMethod
from bakery_pos.models.role import Role
from bakery_pos.schemas.sale import CartLineAdd, CartLineUpdate, CheckoutRequest
from bakery_pos.services.cart import Cart
from bakery_pos.services.receipt import format_receipt_text
from bakery_pos.services.sales import SalesLedger

from tests.helpers import sign_in

STAFF = Account(id="3", name="Mike Staff", email="staff@bakery.com", role=Role.STAFF)


# ── Checkout ──────────────────────────────────────

def test_checkout_freezes_cart_into_sale(bun, tart):
    ledger = SalesLedger()
    cart = Cart()
    cart.add_line(bun, 2)
    cart.add_line(tart, 1)

    sale = ledger.checkout(
        cart,
        discount=Decimal("10"),
        payment_method=PaymentMethod.UPI,
        staff=STAFF,
        customer=Customer(name="Asha", phone=""),
    )

    assert sale.total == Decimal("130")
    assert sale.final_total == Decimal("120")
    assert sale.staff_name == "Mike Staff"
    assert sale.customer_name == "Asha"
    assert sale.customer_phone is None
    assert sale.item_count == 3
    assert cart.is_empty()
    assert ledger.all() == [sale]


def test_checkout_prepends_newest_first(bun):
    ledger = SalesLedger()
    cart = Cart()
    cart.add_line(bun)
    first = ledger.checkout(cart, Decimal("0"), PaymentMethod.CASH, STAFF)
    cart.add_line(bun)
    second = ledger.checkout(cart, Decimal("0"), PaymentMethod.CARD, STAFF)
    assert ledger.all() == [second, first]
    assert first.id != second.id


def test_checkout_empty_cart_records_nothing():
    ledger = SalesLedger()
    with pytest.raises(EmptyCartError):
        ledger.checkout(Cart(), Decimal("0"), PaymentMethod.CASH, STAFF)
    assert len(ledger) == 0


def test_checkout_does_not_touch_stock(bun):
    cart = Cart()
    cart.add_line(bun, 3)
    SalesLedger().checkout(cart, Decimal("0"), PaymentMethod.CASH, STAFF)
    assert bun.stock == 10


def test_sale_is_immutable(bun):
    cart = Cart()
    cart.add_line(bun)
    sale = SalesLedger().checkout(cart, Decimal("0"), PaymentMethod.CASH, STAFF)
    with pytest.raises(Exception):
        sale.discount = Decimal("5")


def test_receipt_text(state, bun):
    cart = Cart()
    cart.add_line(bun, 2)
    sale = SalesLedger().checkout(cart, Decimal("10"), PaymentMethod.CASH, STAFF)
    text = format_receipt_text(sale, state.company.get())
    assert "Sweet Crumbs Bakery" in text
    assert "2 x ₹50 = ₹100" in text
    assert "Discount: -₹10" in text
    assert "TOTAL: ₹90" in text


# ── Endpoints ─────────────────────────────────────

@pytest.mark.asyncio
async def test_cart_and_checkout_flow(state):
    client, session = await sign_in(state, "staff")
    ledger_size = len(state.sales)

    await sales_api.add_to_cart(CartLineAdd(item_id="2", quantity=2), session=session, client=client, state=state)
    cart = await sales_api.add_to_cart(CartLineAdd(item_id="3"), session=session, client=client, state=state)
    assert cart.subtotal == Decimal("170")

    sale = await sales_api.checkout(
        CheckoutRequest(discount=Decimal("20"), payment_method="card"),
        session=session,
        client=client,
        state=state,
    )
    assert sale.final_total == Decimal("150")
    assert sale.staff_id == "3"
    assert len(state.sales) == ledger_size + 1
    assert state.sales.all()[0] is sale
    assert client.cart.is_empty()


@pytest.mark.asyncio
async def test_add_out_of_stock_item_returns_400(state):
    client, session = await sign_in(state, "staff")
    with pytest.raises(HTTPException) as exc_info:
        await sales_api.add_to_cart(CartLineAdd(item_id="6"), session=session, client=client, state=state)
    assert exc_info.value.status_code == 400
    assert client.cart.is_empty()


@pytest.mark.asyncio
async def test_update_cart_item_zero_removes(state):
    client, session = await sign_in(state, "staff")
    await sales_api.add_to_cart(CartLineAdd(item_id="2"), session=session, client=client, state=state)
    cart = await sales_api.update_cart_item(
        "2", CartLineUpdate(quantity=0), session=session, client=client, state=state
    )
    assert cart.items == []


@pytest.mark.asyncio
async def test_checkout_empty_cart_returns_400(state):
    client, session = await sign_in(state, "manager")
    with pytest.raises(HTTPException) as exc_info:
        await sales_api.checkout(CheckoutRequest(), session=session, client=client, state=state)
    assert exc_info.value.status_code == 400
    assert "Empty Cart" in exc_info.value.detail


@pytest.mark.asyncio
async def test_carts_are_per_client(state):
    staff_client, staff = await sign_in(state, "staff")
    manager_client, manager = await sign_in(state, "manager")
    await sales_api.add_to_cart(CartLineAdd(item_id="2"), session=staff, client=staff_client, state=state)
    cart = await sales_api.get_cart(discount=Decimal("0"), session=manager, client=manager_client)
    assert cart.items == []


@pytest.mark.asyncio
async def test_staff_sees_only_own_sales(state):
    _, staff = await sign_in(state, "staff")
    _, manager = await sign_in(state, "manager")

    own = await sales_api.list_sales(session=staff, state=state)
    every = await sales_api.list_sales(session=manager, state=state)

    assert own.total == 3
    assert {s.staff_id for s in own.items} == {"3"}
    assert every.total == len(state.sales)


@pytest.mark.asyncio
async def test_staff_cannot_open_other_staff_sale(state):
    _, staff = await sign_in(state, "staff")
    foreign = next(s for s in state.sales if s.staff_id != "3")
    with pytest.raises(HTTPException) as exc_info:
        await sales_api.get_sale(foreign.id, session=staff, state=state)
    assert exc_info.value.status_code == 404
