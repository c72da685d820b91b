"""Dashboard statistics and sales reports derived from the ledgers."""

from collections import defaultdict
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from pydantic import BaseModel, Field

from bakery_pos.core.config import settings
from bakery_pos.models.mixins import utcnow
from bakery_pos.models.order import PaymentMethod, Sale

ZERO = Decimal("0")


class DailySales(BaseModel):
    date: date
    sales: Decimal


class TopSellingItem(BaseModel):
    name: str
    quantity: int
    revenue: Decimal


class DashboardStats(BaseModel):
    today_sales: Decimal
    weekly_sales: Decimal
    monthly_sales: Decimal
    total_items: int
    low_stock_items: int
    total_staff: int
    daily_sales_data: list[DailySales]
    top_selling_items: list[TopSellingItem]


class PaymentMethodStat(BaseModel):
    payment_method: PaymentMethod
    total_sales: int
    total_revenue: Decimal
    percentage: Decimal = Field(..., decimal_places=2)


class StaffPerformance(BaseModel):
    staff_id: str
    name: str
    sales: int
    revenue: Decimal


class CategoryPerformance(BaseModel):
    name: str
    revenue: Decimal
    percentage: Decimal = Field(..., decimal_places=2)


class SalesReport(BaseModel):
    total_revenue: Decimal
    total_sales: int
    payment_methods: list[PaymentMethodStat]
    staff_performance: list[StaffPerformance]
    category_performance: list[CategoryPerformance]
    top_selling_items: list[TopSellingItem]


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount as whole rupees with Indian digit grouping, e.g. ``₹1,23,456``."""
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    digits = str(abs(int(rounded)))
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return f"{sign}{settings.CURRENCY_SYMBOL}{','.join(groups)}"


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    if not whole:
        return Decimal("0.00")
    return (part * 100 / whole).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def sales_since(sales, start: datetime) -> list[Sale]:
    return [s for s in sales if s.created_at >= start]


def revenue(sales) -> Decimal:
    return sum((s.final_total for s in sales), ZERO)


def daily_sales(sales, days: int = 7, now: datetime | None = None) -> list[DailySales]:
    """Revenue per calendar day (UTC) for the last ``days`` days, oldest first."""
    today = (now or utcnow()).date()
    per_day: dict[date, Decimal] = defaultdict(lambda: ZERO)
    for sale in sales:
        per_day[sale.created_at.date()] += sale.final_total
    return [
        DailySales(date=day, sales=per_day[day])
        for day in (today - timedelta(days=offset) for offset in range(days - 1, -1, -1))
    ]


def top_selling_items(sales, limit: int = 5) -> list[TopSellingItem]:
    quantity: dict[str, int] = defaultdict(int)
    earned: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for sale in sales:
        for line in sale.items:
            quantity[line.item_name] += line.quantity
            earned[line.item_name] += line.total
    ranked = sorted(quantity, key=lambda name: (-quantity[name], -earned[name], name))
    return [
        TopSellingItem(name=name, quantity=quantity[name], revenue=earned[name])
        for name in ranked[:limit]
    ]


def dashboard_stats(sales, inventory, directory, now: datetime | None = None) -> DashboardStats:
    now = now or utcnow()
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    sales = list(sales)
    return DashboardStats(
        today_sales=revenue(sales_since(sales, day_start)),
        weekly_sales=revenue(sales_since(sales, now - timedelta(days=7))),
        monthly_sales=revenue(sales_since(sales, now - timedelta(days=30))),
        total_items=len(inventory),
        low_stock_items=len(inventory.low_stock()),
        total_staff=directory.active_count(),
        daily_sales_data=daily_sales(sales, now=now),
        top_selling_items=top_selling_items(sales),
    )


def payment_method_breakdown(sales) -> list[PaymentMethodStat]:
    sales = list(sales)
    total = revenue(sales)
    stats = []
    for method in PaymentMethod:
        subset = [s for s in sales if s.payment_method == method]
        earned = revenue(subset)
        stats.append(PaymentMethodStat(
            payment_method=method,
            total_sales=len(subset),
            total_revenue=earned,
            percentage=_percentage(earned, total),
        ))
    return stats


def staff_performance(sales) -> list[StaffPerformance]:
    rows: dict[str, StaffPerformance] = {}
    for sale in sales:
        row = rows.get(sale.staff_id)
        if row is None:
            row = rows[sale.staff_id] = StaffPerformance(
                staff_id=sale.staff_id, name=sale.staff_name, sales=0, revenue=ZERO
            )
        row.sales += 1
        row.revenue += sale.final_total
    return sorted(rows.values(), key=lambda r: r.revenue, reverse=True)


def category_performance(sales, inventory) -> list[CategoryPerformance]:
    """Line revenue grouped by the category of each sold item.

    Items no longer in the catalogue are reported under "Other".
    """
    categories = {p.id: p.category for p in inventory}
    earned: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for sale in sales:
        for line in sale.items:
            earned[categories.get(line.item_id, "Other")] += line.total
    total = sum(earned.values(), ZERO)
    return [
        CategoryPerformance(name=name, revenue=amount, percentage=_percentage(amount, total))
        for name, amount in sorted(earned.items(), key=lambda kv: kv[1], reverse=True)
    ]


def sales_report(sales, inventory) -> SalesReport:
    sales = list(sales)
    return SalesReport(
        total_revenue=revenue(sales),
        total_sales=len(sales),
        payment_methods=payment_method_breakdown(sales),
        staff_performance=staff_performance(sales),
        category_performance=category_performance(sales, inventory),
        top_selling_items=top_selling_items(sales),
    )
