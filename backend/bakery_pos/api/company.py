"""Company settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from bakery_pos.core.deps import require_screen
from bakery_pos.core.rbac import Screen
from bakery_pos.db.state import BakeryState, get_state
from bakery_pos.models.company import Company
from bakery_pos.schemas.user import CompanyUpdate
from bakery_pos.services.session import Session

router = APIRouter(prefix="/company", tags=["company"])

can_edit = require_screen(Screen.COMPANY)


@router.get("", response_model=Company)
async def get_company(
    session: Session = Depends(can_edit),
    state: BakeryState = Depends(get_state),
):
    return state.company.get()


@router.put("", response_model=Company)
async def update_company(
    body: CompanyUpdate,
    session: Session = Depends(can_edit),
    state: BakeryState = Depends(get_state),
):
    try:
        return state.company.update(**body.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False),
        ) from exc
