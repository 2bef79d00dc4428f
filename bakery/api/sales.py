"""Sale recording and sales history endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from bakery.api.dependencies import get_sales_ledger
from bakery.schemas.sale import Sale, SaleDraft, SaleList, SaleQuote, SaleRecorded, SalesReport
from bakery.services.errors import InvalidInputError, NotFoundError
from bakery.services.reporting import build_sales_report
from bakery.services.sales_ledger import SalesLedger

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("", response_model=SaleList)
def list_sales(ledger: SalesLedger = Depends(get_sales_ledger)):
    """List recorded sales, newest first."""
    sales = ledger.list_all()
    return SaleList(sales=sales, count=len(sales))


@router.get("/history", response_model=SalesReport)
def get_sales_history(
    customer: Optional[str] = Query(None, description="Case-insensitive part of the customer name"),
    date: Optional[str] = Query(None, description="Date prefix, e.g. 2025-03 or 2025-03-14"),
    ledger: SalesLedger = Depends(get_sales_ledger),
):
    """Filtered sales history with count and revenue."""
    return build_sales_report(ledger.list_all(), ledger.recipes.by_id(), customer, date)


@router.post("/quote", response_model=SaleQuote)
def quote_sale(draft: SaleDraft, ledger: SalesLedger = Depends(get_sales_ledger)):
    """Running total of a sale form before it is recorded."""
    return ledger.quote(draft)


@router.post("", response_model=SaleRecorded, status_code=201)
def record_sale(draft: SaleDraft, ledger: SalesLedger = Depends(get_sales_ledger)):
    """
    Record a sale and create one order per line.

    Incomplete lines are dropped. Returns 400 and records nothing when the
    customer name is blank or no line is complete.
    """
    try:
        return ledger.record(draft)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{sale_id}", response_model=Sale)
def get_sale(sale_id: str, ledger: SalesLedger = Depends(get_sales_ledger)):
    try:
        return ledger.get(sale_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{sale_id}", status_code=204)
def delete_sale(sale_id: str, ledger: SalesLedger = Depends(get_sales_ledger)):
    try:
        ledger.delete(sale_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
