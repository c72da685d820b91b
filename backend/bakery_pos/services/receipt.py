"""Receipt generation for completed sales."""

from typing import Literal

from pydantic import BaseModel

from bakery_pos.models.company import Company
from bakery_pos.models.order import Sale
from bakery_pos.services.reports import format_currency

WIDTH = 32


class ReceiptLine(BaseModel):
    """Single line in receipt."""
    text: str
    align: Literal["left", "center", "right"] = "left"
    bold: bool = False


def generate_receipt_lines(
    sale: Sale,
    company: Company,
    footer_message: str = "Thank you! Visit again.",
) -> list[ReceiptLine]:
    """Generate formatted receipt lines for a 58mm/80mm printer."""
    lines: list[ReceiptLine] = []

    # Header - company info
    lines.append(ReceiptLine(text=company.name, align="center", bold=True))
    if company.address:
        lines.append(ReceiptLine(text=company.address, align="center"))
    if company.phone:
        lines.append(ReceiptLine(text=f"Tel: {company.phone}", align="center"))
    if company.gst:
        lines.append(ReceiptLine(text=f"GSTIN: {company.gst}", align="center"))

    lines.append(ReceiptLine(text="=" * WIDTH, align="center"))

    # Sale info
    lines.append(ReceiptLine(text=f"Bill: {sale.id[:12]}", bold=True))
    lines.append(ReceiptLine(text=sale.created_at.strftime("%d/%m/%Y %H:%M:%S")))
    lines.append(ReceiptLine(text=f"Staff: {sale.staff_name}"))

    if sale.customer_name:
        lines.append(ReceiptLine(text=f"Customer: {sale.customer_name}"))
    if sale.customer_phone:
        lines.append(ReceiptLine(text=f"Phone: {sale.customer_phone}"))

    lines.append(ReceiptLine(text="-" * WIDTH))

    for item in sale.items:
        lines.append(ReceiptLine(text=item.item_name))
        lines.append(ReceiptLine(
            text=f"  {item.quantity} x {format_currency(item.price)} = {format_currency(item.total)}"
        ))

    lines.append(ReceiptLine(text="-" * WIDTH))

    lines.append(ReceiptLine(text=f"Subtotal: {format_currency(sale.total)}", align="right"))
    if sale.discount > 0:
        lines.append(ReceiptLine(
            text=f"Discount: -{format_currency(sale.discount)}",
            align="right",
        ))

    lines.append(ReceiptLine(text="=" * WIDTH))
    lines.append(ReceiptLine(
        text=f"TOTAL: {format_currency(sale.final_total)}",
        align="right",
        bold=True,
    ))
    lines.append(ReceiptLine(text=f"Paid by: {sale.payment_method.value.upper()}"))

    lines.append(ReceiptLine(text="=" * WIDTH))
    lines.append(ReceiptLine(text=footer_message, align="center", bold=True))

    return lines


def format_receipt_text(sale: Sale, company: Company) -> str:
    """Plain text receipt for preview/printing."""
    return "\n".join(line.text for line in generate_receipt_lines(sale, company))
