"""Sales/POS endpoints: cart, checkout, sales history and receipts."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from bakery_pos.core.deps import (
    get_client,
    http_exception_from,
    require_any_permission,
    require_screen,
)
from bakery_pos.core.exceptions import BakeryError
from bakery_pos.core.rbac import Screen
from bakery_pos.db.state import BakeryState, ClientSession, get_state
from bakery_pos.models.order import Customer, Sale
from bakery_pos.models.product import Product
from bakery_pos.models.role import Permission
from bakery_pos.schemas.sale import (
    CartLineAdd,
    CartLineUpdate,
    CartResponse,
    CheckoutRequest,
    SaleListResponse,
)
from bakery_pos.services.cart import Cart, compute_totals
from bakery_pos.services.receipt import format_receipt_text
from bakery_pos.services.session import Session

router = APIRouter(prefix="/sales", tags=["sales"])

can_sell = require_screen(Screen.SALES)
can_view_sales = require_any_permission(Permission.VIEW_ALL_SALES, Permission.VIEW_OWN_SALES)


def _cart_response(cart: Cart, discount: Decimal = Decimal("0")) -> CartResponse:
    totals = compute_totals(cart, discount)
    return CartResponse(
        items=list(cart.lines),
        item_count=cart.item_count,
        subtotal=totals.subtotal,
        discount=totals.discount,
        final_total=totals.final_total,
    )


def _visible_sale(session: Session, sale: Sale) -> bool:
    if session.has_permission(Permission.VIEW_ALL_SALES):
        return True
    return sale.staff_id == session.account.id


@router.get("/items", response_model=list[Product])
async def list_sellable_items(
    search: str = "",
    session: Session = Depends(can_sell),
    state: BakeryState = Depends(get_state),
):
    """Item picker for the POS screen, searched by name or category."""
    return state.inventory.filter(search)


@router.get("/cart", response_model=CartResponse)
async def get_cart(
    discount: Decimal = Query(Decimal("0"), ge=0),
    session: Session = Depends(can_sell),
    client: ClientSession = Depends(get_client),
):
    return _cart_response(client.cart, discount)


@router.post("/cart/items", response_model=CartResponse)
async def add_to_cart(
    body: CartLineAdd,
    session: Session = Depends(can_sell),
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    """Add an item to the cart, bounded by its current stock."""
    try:
        product = state.inventory.get(body.item_id)
        client.cart.add_line(product, body.quantity)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    return _cart_response(client.cart)


@router.put("/cart/items/{item_id}", response_model=CartResponse)
async def update_cart_item(
    item_id: str,
    body: CartLineUpdate,
    session: Session = Depends(can_sell),
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    """Set a line's quantity; zero removes the line."""
    if body.quantity == 0:
        client.cart.remove_line(item_id)
        return _cart_response(client.cart)
    try:
        product = state.inventory.get(item_id)
        client.cart.set_line_quantity(product, body.quantity)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    return _cart_response(client.cart)


@router.delete("/cart", response_model=CartResponse)
async def clear_cart(
    session: Session = Depends(can_sell),
    client: ClientSession = Depends(get_client),
):
    client.cart.clear()
    return _cart_response(client.cart)


@router.post("/checkout", response_model=Sale, status_code=status.HTTP_201_CREATED)
async def checkout(
    body: CheckoutRequest,
    session: Session = Depends(can_sell),
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    """Complete the sale for the current cart and clear it."""
    try:
        return state.sales.checkout(
            client.cart,
            discount=body.discount,
            payment_method=body.payment_method,
            staff=session.account,
            customer=Customer(name=body.customer_name, phone=body.customer_phone),
        )
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.get("", response_model=SaleListResponse)
async def list_sales(
    session: Session = Depends(can_view_sales),
    state: BakeryState = Depends(get_state),
):
    """All sales with view_all_sales, otherwise the caller's own sales."""
    if session.has_permission(Permission.VIEW_ALL_SALES):
        sales = state.sales.all()
    else:
        sales = state.sales.for_staff(session.account.id)
    return SaleListResponse(items=sales, total=len(sales))


@router.get("/{sale_id}", response_model=Sale)
async def get_sale(
    sale_id: str,
    session: Session = Depends(can_view_sales),
    state: BakeryState = Depends(get_state),
):
    try:
        sale = state.sales.get(sale_id)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    if not _visible_sale(session, sale):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sale not found")
    return sale


@router.get("/{sale_id}/receipt", response_class=PlainTextResponse)
async def get_receipt(
    sale_id: str,
    session: Session = Depends(can_view_sales),
    state: BakeryState = Depends(get_state),
):
    """Plain text receipt for a sale."""
    sale = await get_sale(sale_id, session=session, state=state)
    return format_receipt_text(sale, state.company.get())
