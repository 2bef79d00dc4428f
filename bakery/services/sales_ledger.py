"""Sale recording.

A sale is validated, totalled, prepended to the sales history and fanned out
into one fulfillment order per line. Recorded sales are never edited.
"""
import logging
import uuid
from datetime import datetime, timezone

from bakery.models import Document
from bakery.schemas.order import Order, OrderStatus
from bakery.schemas.sale import Sale, SaleDraft, SaleItem, SaleQuote, SaleRecorded
from bakery.services.cost_calculator import calculate_sale_total
from bakery.services.document_store import DocumentStore
from bakery.services.errors import InvalidInputError, NotFoundError
from bakery.services.order_book import OrderBook
from bakery.services.recipe_book import RecipeBook

logger = logging.getLogger(__name__)


def accepted_items(draft: SaleDraft) -> list[SaleItem]:
    """Lines with a recipe, a positive quantity and a positive price.

    Other lines are dropped without being reported.
    """
    return [
        SaleItem(
            recipe_id=item.recipe_id.strip(),
            quantity=item.quantity,
            unit_sale_price=item.unit_sale_price,
        )
        for item in draft.items
        if item.recipe_id.strip() and item.quantity > 0 and item.unit_sale_price > 0
    ]


class SalesLedger:
    """Repository for sales; writes orders through an OrderBook."""

    def __init__(self, store: DocumentStore, recipes: RecipeBook, orders: OrderBook):
        self.store = store
        self.recipes = recipes
        self.orders = orders
        self._sales: list[Sale] = store.load(Document.KEY_SALES, list[Sale], list)

    def list_all(self) -> list[Sale]:
        return list(self._sales)

    def get(self, sale_id: str) -> Sale:
        for sale in self._sales:
            if sale.id == sale_id:
                return sale
        raise NotFoundError(f"Sale {sale_id} not found")

    def quote(self, draft: SaleDraft) -> SaleQuote:
        """Running total of the form as entered, over every line."""
        total = calculate_sale_total(draft.items, self.recipes.by_id())
        return SaleQuote(total=total, item_count=len(draft.items))

    def record(self, draft: SaleDraft) -> SaleRecorded:
        """
        Validate and record a sale.

        Raises InvalidInputError without writing anything if the customer name
        is blank or no line is complete. The total is taken over every line of
        the form, the same figure quote() shows, while only complete lines
        are stored as items and become orders.
        """
        customer_name = draft.customer_name.strip()
        if not customer_name:
            raise InvalidInputError("Please enter customer name")

        items = accepted_items(draft)
        if not items:
            raise InvalidInputError("Please add at least one item")

        recipes_by_id = self.recipes.by_id()
        sale = Sale(
            id=uuid.uuid4().hex,
            customer_name=customer_name,
            timestamp=datetime.now(timezone.utc),
            items=items,
            total=calculate_sale_total(draft.items, recipes_by_id),
        )

        orders = []
        for index, item in enumerate(items):
            recipe = recipes_by_id.get(item.recipe_id)
            orders.append(Order(
                id=f"{sale.id}-{index}",
                timestamp=sale.timestamp,
                customer=sale.customer_name,
                product=recipe.name if recipe else item.recipe_id,
                quantity=item.quantity,
                unit_price=item.unit_sale_price,
                status=OrderStatus.PLACED,
                paid=False,
            ))

        self._sales.insert(0, sale)
        self.store.save(Document.KEY_SALES, list[Sale], self._sales, commit=False)
        self.orders.prepend(orders)

        dropped = len(draft.items) - len(items)
        logger.info(
            f"Recorded sale {sale.id} for {customer_name}: {len(items)} items, "
            f"total {sale.total} ({dropped} incomplete lines dropped)"
        )
        return SaleRecorded(sale=sale, orders=orders, next_draft=SaleDraft())

    def delete(self, sale_id: str) -> None:
        """Remove a sale from the history. Its orders are left alone."""
        sale = self.get(sale_id)
        self._sales.remove(sale)
        self.store.save(Document.KEY_SALES, list[Sale], self._sales)
        logger.info(f"Deleted sale {sale_id}")
