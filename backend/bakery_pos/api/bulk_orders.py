"""Bulk order endpoints: item draft, creation and status tracking."""

from fastapi import APIRouter, Depends, status

from bakery_pos.core.deps import get_client, http_exception_from, require_screen
from bakery_pos.core.exceptions import BakeryError
from bakery_pos.core.rbac import Screen
from bakery_pos.db.state import BakeryState, ClientSession, get_state
from bakery_pos.models.order import BulkOrder
from bakery_pos.schemas.sale import (
    BulkOrderCreate,
    BulkOrderListResponse,
    BulkOrderStatusUpdate,
    CartLineAdd,
    CartLineUpdate,
    DraftResponse,
)
from bakery_pos.services.session import Session

router = APIRouter(prefix="/bulk-orders", tags=["bulk-orders"])

can_manage = require_screen(Screen.BULK_ORDERS)


def _draft_response(client: ClientSession) -> DraftResponse:
    draft = client.bulk_order_draft
    return DraftResponse(items=list(draft.items), total=draft.total)


@router.get("", response_model=BulkOrderListResponse)
async def list_bulk_orders(
    search: str = "",
    status_filter: str = "all",
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """List bulk orders, searched by customer name or phone."""
    orders = state.bulk_orders.filter(search, status_filter)
    return BulkOrderListResponse(items=orders, total=len(orders))


@router.get("/draft", response_model=DraftResponse)
async def get_draft(
    session: Session = Depends(can_manage),
    client: ClientSession = Depends(get_client),
):
    return _draft_response(client)


@router.post("/draft/items", response_model=DraftResponse)
async def add_draft_item(
    body: CartLineAdd,
    session: Session = Depends(can_manage),
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    try:
        product = state.inventory.get(body.item_id)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    client.bulk_order_draft.add_item(product, body.quantity)
    return _draft_response(client)


@router.put("/draft/items/{item_id}", response_model=DraftResponse)
async def update_draft_item(
    item_id: str,
    body: CartLineUpdate,
    session: Session = Depends(can_manage),
    client: ClientSession = Depends(get_client),
):
    client.bulk_order_draft.set_quantity(item_id, body.quantity)
    return _draft_response(client)


@router.post("", response_model=BulkOrder, status_code=status.HTTP_201_CREATED)
async def create_bulk_order(
    body: BulkOrderCreate,
    session: Session = Depends(can_manage),
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    """Create a bulk order from the drafted items and clear the draft."""
    try:
        order = state.bulk_orders.create(
            customer_name=body.customer_name,
            customer_phone=body.customer_phone,
            delivery_date=body.delivery_date,
            items=client.bulk_order_draft.items,
            advance_paid=body.advance_paid,
            notes=body.notes,
        )
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    client.bulk_order_draft.clear()
    return order


@router.get("/{order_id}", response_model=BulkOrder)
async def get_bulk_order(
    order_id: str,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    try:
        return state.bulk_orders.get(order_id)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.patch("/{order_id}/status", response_model=BulkOrder)
async def update_bulk_order_status(
    order_id: str,
    body: BulkOrderStatusUpdate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """Change the status; every transition is allowed."""
    try:
        return state.bulk_orders.update_status(order_id, body.status)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
