"""Dashboard and reporting endpoints."""

from fastapi import APIRouter, Depends

from bakery_pos.core.deps import require_screen
from bakery_pos.core.rbac import Screen
from bakery_pos.db.state import BakeryState, get_state
from bakery_pos.services import reports
from bakery_pos.services.session import Session

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/dashboard", response_model=reports.DashboardStats)
async def get_dashboard(
    session: Session = Depends(require_screen(Screen.DASHBOARD)),
    state: BakeryState = Depends(get_state),
):
    """Headline figures, last-7-days chart data and low stock count."""
    return reports.dashboard_stats(state.sales, state.inventory, state.accounts)


@router.get("/sales", response_model=reports.SalesReport)
async def get_sales_report(
    session: Session = Depends(require_screen(Screen.REPORTS)),
    state: BakeryState = Depends(get_state),
):
    """Revenue by payment method, staff member, category and item."""
    return reports.sales_report(state.sales, state.inventory)
