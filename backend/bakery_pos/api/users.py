"""User management endpoints (admin only)."""

from fastapi import APIRouter, Depends, status

from bakery_pos.core.deps import http_exception_from, require_screen
from bakery_pos.core.exceptions import BakeryError
from bakery_pos.core.rbac import Screen
from bakery_pos.db.state import BakeryState, get_state
from bakery_pos.models.account import Account
from bakery_pos.schemas.user import AccountActiveUpdate, AccountCreate, AccountListResponse
from bakery_pos.services.session import Session

router = APIRouter(prefix="/users", tags=["users"])

can_manage = require_screen(Screen.USERS)


@router.get("", response_model=AccountListResponse)
async def list_users(
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    accounts = state.accounts.all()
    return AccountListResponse(items=accounts, total=len(accounts))


@router.post("", response_model=Account, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: AccountCreate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    """Create an account. The role cannot be changed afterwards."""
    try:
        return state.accounts.create(body.name, body.email, body.role, body.password)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc


@router.patch("/{user_id}/active", response_model=Account)
async def set_user_active(
    user_id: str,
    body: AccountActiveUpdate,
    session: Session = Depends(can_manage),
    state: BakeryState = Depends(get_state),
):
    try:
        return state.accounts.set_active(user_id, body.is_active)
    except BakeryError as exc:
        raise http_exception_from(exc) from exc
