"""Fulfillment orders.

Orders are created from recorded sales (one per sale line) or entered
directly, and are edited independently afterwards. Newest first.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from bakery.models import Document
from bakery.schemas.order import Order, OrderCreate, OrderStatus, OrderUpdate
from bakery.services.document_store import DocumentStore
from bakery.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def order_matches(order: Order, search: Optional[str], status: Optional[OrderStatus]) -> bool:
    """Text search over customer, product, comments and address, AND status."""
    if status is not None and order.status != status:
        return False
    if search:
        haystack = " ".join(
            part for part in (order.customer, order.product, order.comments, order.address) if part
        )
        return search.lower() in haystack.lower()
    return True


class OrderBook:
    """Repository for orders."""

    def __init__(self, store: DocumentStore):
        self.store = store
        self._orders: list[Order] = store.load(Document.KEY_ORDERS, list[Order], list)

    def list_all(self, search: Optional[str] = None, status: Optional[OrderStatus] = None) -> list[Order]:
        return [order for order in self._orders if order_matches(order, search, status)]

    def get(self, order_id: str) -> Order:
        for order in self._orders:
            if order.id == order_id:
                return order
        raise NotFoundError(f"Order {order_id} not found")

    def add(self, data: OrderCreate) -> Order:
        """Record an order that did not come from a sale."""
        order = Order(
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self.prepend([order])
        return order

    def prepend(self, orders: list[Order]) -> None:
        self._orders = list(orders) + self._orders
        self._save()
        logger.info(f"Added {len(orders)} orders")

    def update(self, order_id: str, data: OrderUpdate) -> Order:
        """Apply an edit. Any status may be set at any time."""
        current = self.get(order_id)
        changes = {key: value for key, value in data.model_dump(exclude_unset=True).items() if value is not None}
        updated = current.model_copy(update=changes)
        self._orders[self._orders.index(current)] = updated
        self._save()
        logger.info(f"Updated order {order_id}: {', '.join(changes) or 'no changes'}")
        return updated

    def _save(self) -> None:
        self.store.save(Document.KEY_ORDERS, list[Order], self._orders)
