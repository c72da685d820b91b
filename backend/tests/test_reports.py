"""Unit tests for dashboard statistics and sales reports."""

from decimal import Decimal

import pytest
from fastapi import HTTPException

from bakery_pos.api import reports as reports_api
from bakery_pos.core.deps import require_screen
from bakery_pos.core.rbac import Screen
from bakery_pos.models.order import PaymentMethod
from bakery_pos.services import reports

from tests.helpers import NOW, sign_in


# ── Currency formatting ───────────────────────────

@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "₹0"),
        (Decimal("120"), "₹120"),
        (Decimal("1000"), "₹1,000"),
        (Decimal("123456"), "₹1,23,456"),
        (Decimal("89450.5"), "₹89,451"),
        (Decimal("12345678"), "₹1,23,45,678"),
        (Decimal("-70"), "-₹70"),
    ],
)
def test_format_currency(amount, expected):
    assert reports.format_currency(amount) == expected


# ── Dashboard ─────────────────────────────────────

def test_dashboard_stats(state):
    stats = reports.dashboard_stats(state.sales, state.inventory, state.accounts, now=NOW)

    # 2h ago: 4*60 + 6*30 = 420; 5h ago: 450 - 50 = 400
    assert stats.today_sales == Decimal("820")
    # plus 26h ago: 100 + 80 = 180; 50h ago: 550 + 120 - 20 = 650; 75h ago: 210
    assert stats.weekly_sales == Decimal("1860")
    assert stats.monthly_sales == Decimal("1860")
    assert stats.total_items == 8
    assert stats.low_stock_items == 2
    assert stats.total_staff == 3
    assert len(stats.daily_sales_data) == 7
    assert stats.daily_sales_data[-1].date == NOW.date()
    assert stats.daily_sales_data[-1].sales == Decimal("820")


def test_top_selling_items(state):
    top = reports.top_selling_items(state.sales, limit=2)
    assert [(t.name, t.quantity) for t in top] == [("Croissant", 6), ("Chocolate Chip Cookies", 6)]
    assert top[0].revenue == Decimal("360")


# ── Sales report ──────────────────────────────────

def test_payment_method_breakdown(state):
    stats = {s.payment_method: s for s in reports.payment_method_breakdown(state.sales)}
    assert stats[PaymentMethod.UPI].total_sales == 2
    assert stats[PaymentMethod.UPI].total_revenue == Decimal("1050")
    assert sum(s.total_sales for s in stats.values()) == 5


def test_staff_performance(state):
    rows = reports.staff_performance(state.sales)
    assert rows[0].name == "Mike Staff"
    assert rows[0].sales == 3
    assert rows[0].revenue == Decimal("1470")


def test_category_performance_falls_back_to_other(state):
    state.inventory.delete_item("4")
    names = {row.name for row in reports.category_performance(state.sales, state.inventory)}
    assert "Other" in names
    assert "Muffins" not in names


# ── Endpoints ─────────────────────────────────────

@pytest.mark.asyncio
async def test_sales_report_requires_view_reports(state):
    _, staff = await sign_in(state, "staff")
    with pytest.raises(HTTPException) as exc_info:
        await require_screen(Screen.REPORTS)(session=staff)
    assert exc_info.value.status_code == 403

    _, manager = await sign_in(state, "manager")
    report = await reports_api.get_sales_report(session=manager, state=state)
    assert report.total_sales == 5
    assert report.total_revenue == Decimal("1860")
