"""Test fixtures and configuration."""
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bakery.models import Base
from bakery.schemas.ingredient import IngredientCreate
from bakery.schemas.recipe import RecipeCreate, RecipeIngredientUsage
from bakery.services.document_store import DocumentStore
from bakery.services.ingredient_catalog import IngredientCatalog
from bakery.services.order_book import OrderBook
from bakery.services.recipe_book import RecipeBook
from bakery.services.sales_ledger import SalesLedger


@pytest.fixture(scope="function")
def engine():
    """Create an in-memory SQLite engine for testing."""
    # Use check_same_thread=False for compatibility with FastAPI TestClient
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Create a test database session."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def store(db):
    return DocumentStore(db)


# ---------------------------------------------------------------------------
# Services, wired the same way the API wires them
# ---------------------------------------------------------------------------

@pytest.fixture
def recipe_book(store):
    return RecipeBook(store)


@pytest.fixture
def catalog(store, recipe_book):
    catalog = IngredientCatalog(store)
    catalog.subscribe(recipe_book.recalculate_all)
    return catalog


@pytest.fixture
def order_book(store):
    return OrderBook(store)


@pytest.fixture
def ledger(store, recipe_book, order_book):
    return SalesLedger(store, recipe_book, order_book)


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def ingredient_factory(catalog):
    """Factory to add ingredients to the catalog."""
    def _create(name="Flour", unit_price="2.00", **kwargs):
        return catalog.add(IngredientCreate(
            name=name,
            unit_price=Decimal(str(unit_price)),
            recipe_unit=kwargs.pop("recipe_unit", "kg"),
            **kwargs,
        ))
    return _create


@pytest.fixture
def recipe_factory(recipe_book):
    """Factory to create recipes.

    ingredients is a list of (name, quantity) or (name, quantity, unit).
    """
    def _create(name="Bread", ingredients=(), sale_price=None):
        usages = [
            RecipeIngredientUsage(
                ingredient_name=line[0],
                quantity=Decimal(str(line[1])),
                unit=line[2] if len(line) > 2 else "",
            )
            for line in ingredients
        ]
        return recipe_book.create(RecipeCreate(
            name=name,
            ingredients=usages,
            sale_price=Decimal(str(sale_price)) if sale_price is not None else None,
        ))
    return _create
