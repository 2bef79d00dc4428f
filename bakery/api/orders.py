"""Order tracking endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from bakery.api.dependencies import get_order_book
from bakery.schemas.order import Order, OrderCreate, OrderList, OrderStatus, OrderUpdate
from bakery.services.errors import NotFoundError
from bakery.services.order_book import OrderBook

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderList)
def list_orders(
    search: Optional[str] = Query(None, description="Search customer, product, comments, address"),
    status: Optional[OrderStatus] = Query(None, description="Filter by status"),
    orders: OrderBook = Depends(get_order_book),
):
    """List orders, newest first."""
    items = orders.list_all(search=search, status=status)
    return OrderList(orders=items, count=len(items))


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, orders: OrderBook = Depends(get_order_book)):
    try:
        return orders.get(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Order, status_code=201)
def create_order(data: OrderCreate, orders: OrderBook = Depends(get_order_book)):
    """Add an order that was not taken through a sale."""
    return orders.add(data)


@router.patch("/{order_id}", response_model=Order)
def update_order(
    order_id: str,
    data: OrderUpdate,
    orders: OrderBook = Depends(get_order_book),
):
    """Change status, paid flag, comments or address."""
    try:
        return orders.update(order_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
