"""Navigation: the screens the signed-in account may open."""

from fastapi import APIRouter, Depends

from bakery_pos.core import rbac
from bakery_pos.core.deps import get_session
from bakery_pos.core.rbac import Screen
from bakery_pos.services.session import Session

router = APIRouter(prefix="/screens", tags=["screens"])


@router.get("", response_model=list[Screen])
async def list_screens(session: Session = Depends(get_session)):
    return rbac.accessible_screens(session.account)
