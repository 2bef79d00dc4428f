"""FastAPI dependencies that build the services for one request.

Every request gets services over its own session. The catalog is wired to
the recipe book here so that a price change recosts every recipe.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from bakery.database import get_db
from bakery.services.document_store import DocumentStore
from bakery.services.ingredient_catalog import IngredientCatalog
from bakery.services.order_book import OrderBook
from bakery.services.recipe_book import RecipeBook
from bakery.services.sales_ledger import SalesLedger


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)


def get_recipe_book(store: DocumentStore = Depends(get_store)) -> RecipeBook:
    return RecipeBook(store)


def get_catalog(store: DocumentStore = Depends(get_store)) -> IngredientCatalog:
    """Catalog for reads; nothing is subscribed to it."""
    return IngredientCatalog(store)


def get_recosting_catalog(store: DocumentStore = Depends(get_store)) -> IngredientCatalog:
    """Catalog for mutations, with the recipe book recosting on every change."""
    catalog = IngredientCatalog(store)
    recipes = RecipeBook(store, lookup=catalog.lookup())
    catalog.subscribe(recipes.recalculate_all)
    return catalog


def get_order_book(store: DocumentStore = Depends(get_store)) -> OrderBook:
    return OrderBook(store)


def get_sales_ledger(
    store: DocumentStore = Depends(get_store),
    recipes: RecipeBook = Depends(get_recipe_book),
    orders: OrderBook = Depends(get_order_book),
) -> SalesLedger:
    return SalesLedger(store, recipes, orders)
