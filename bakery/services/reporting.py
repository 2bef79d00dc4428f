"""Sales history filtering and totals."""
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from bakery.schemas.recipe import Recipe
from bakery.schemas.sale import Sale, SaleHistoryEntry, SaleHistoryLine, SalesReport

UNKNOWN_RECIPE = "Unknown Recipe"


def filter_sales(
    sales: Iterable[Sale],
    customer: Optional[str] = None,
    date_prefix: Optional[str] = None,
) -> list[Sale]:
    """
    Keep sales matching both filters, in their stored order.

    customer is a case-insensitive substring of the customer name;
    date_prefix is matched against the start of the ISO timestamp, so
    "2025-03" selects a month and "2025-03-14" a day. Empty filters match
    everything.
    """
    result = []
    for sale in sales:
        if customer and customer.lower() not in sale.customer_name.lower():
            continue
        if date_prefix and not sale.timestamp.isoformat().startswith(date_prefix):
            continue
        result.append(sale)
    return result


def _history_entry(sale: Sale, recipes_by_id: Mapping[str, Recipe]) -> SaleHistoryEntry:
    lines = []
    for item in sale.items:
        recipe = recipes_by_id.get(item.recipe_id)
        lines.append(SaleHistoryLine(
            recipe_id=item.recipe_id,
            recipe_name=recipe.name if recipe else UNKNOWN_RECIPE,
            quantity=item.quantity,
            unit_sale_price=item.unit_sale_price,
            recipe_found=recipe is not None,
        ))
    return SaleHistoryEntry(
        id=sale.id,
        customer_name=sale.customer_name,
        timestamp=sale.timestamp,
        total=sale.total,
        lines=lines,
    )


def build_sales_report(
    sales: Iterable[Sale],
    recipes_by_id: Mapping[str, Recipe],
    customer: Optional[str] = None,
    date_prefix: Optional[str] = None,
) -> SalesReport:
    """Filter the history and total the sales that remain."""
    matched = filter_sales(sales, customer, date_prefix)
    return SalesReport(
        customer=customer or None,
        date=date_prefix or None,
        total_sales=len(matched),
        total_revenue=sum((sale.total for sale in matched), Decimal("0")),
        sales=[_history_entry(sale, recipes_by_id) for sale in matched],
    )
