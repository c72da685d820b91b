"""Inventory endpoints: catalogue and stock levels."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from bakery_pos.core.deps import http_exception_from, require_any_permission
from bakery_pos.core.exceptions import BakeryError
from bakery_pos.db.state import BakeryState, get_state
from bakery_pos.models.product import CATEGORIES, Product
from bakery_pos.models.role import Permission
from bakery_pos.schemas.inventory import (
    InventoryListResponse,
    ItemCreate,
    ItemUpdate,
    LowStockResponse,
    StockUpdate,
)
from bakery_pos.services.session import Session

router = APIRouter(prefix="/inventory", tags=["inventory"])

can_view = require_any_permission(Permission.MANAGE_ITEMS, Permission.VIEW_STOCK)
can_manage = require_any_permission(Permission.MANAGE_ITEMS)


@router.get("", response_model=InventoryListResponse)
async def list_items(
    search: str = "",
    category: str = "all",
    session: Session = Depends(can_view),
    state: BakeryState = Depends(get_state),
):
    """List items filtered by name/category search and category."""
    inventory = state.inventory
    return InventoryListResponse(
        items=inventory.filter(search, category),
        total_items=len(inventory),
        low_stock_count=len(inventory.low_stock()),
        stock_value=inventory.stock_value(),
        category_count=inventory.category_count(),
    )


@router.get("/categories", response_model=list[str])
async def list_categories(session: Session = Depends(can_view)):
    return list(CATEGORIES)


@router.get("/low-stock", response_model=LowStockResponse)
async def get_low_stock_items(
    session: Session = Depends(can_view),
    state: BakeryState = Depends(get_state),
):
    """Items at or below their reorder threshold."""
    items = sorted(state.inventory.low_stock(), key=lambda p: p.stock)
    return LowStockResponse(items=items, count=len(items))


@router.get("/{item_id}", response_model=Product)
async def get_item(
    item_id: str,
    session: Session = Depends(can_view),
    state: BakeryState = Depends(get_state),
):
    try:
        return state.inventory.get(item_id)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_item(
    body: ItemCreate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """Add a bakery item (requires manage_items)."""
    try:
        return state.inventory.add_item(**body.model_dump())
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.patch("/{item_id}", response_model=Product)
async def update_item(
    item_id: str,
    body: ItemUpdate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """Edit item fields (requires manage_items)."""
    try:
        return state.inventory.edit_item(item_id, **body.model_dump(exclude_unset=True))
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False),
        ) from exc


@router.put("/{item_id}/stock", response_model=Product)
async def update_stock(
    item_id: str,
    body: StockUpdate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """Set the stock quantity directly (requires manage_items)."""
    try:
        return state.inventory.update_stock(item_id, body.stock)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    try:
        state.inventory.delete_item(item_id)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
