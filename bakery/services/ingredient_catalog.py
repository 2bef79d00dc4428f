"""Ingredient price catalog.

Holds the ingredient price records and publishes the name -> unit price
lookup that recipe costing reads. Every mutation rewrites both documents
and notifies subscribers with the new lookup.
"""
import logging
from decimal import Decimal
from typing import Callable, Mapping

from bakery.models import Document
from bakery.schemas.ingredient import Ingredient, IngredientCreate, IngredientUpdate
from bakery.services.cost_calculator import build_price_lookup, calculate_unit_price
from bakery.services.document_store import DocumentStore
from bakery.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

LookupSubscriber = Callable[[Mapping[str, Decimal]], None]


class IngredientCatalog:
    """Repository for ingredient prices keyed by name."""

    def __init__(self, store: DocumentStore):
        self.store = store
        self._ingredients: list[Ingredient] = store.load(
            Document.KEY_INGREDIENT_PRICES, list[Ingredient], list
        )
        self._subscribers: list[LookupSubscriber] = []

    def subscribe(self, callback: LookupSubscriber) -> None:
        """Call callback with the new lookup after every catalog change."""
        self._subscribers.append(callback)

    def list_all(self) -> list[Ingredient]:
        return list(self._ingredients)

    def find(self, name: str) -> Ingredient | None:
        for ingredient in self._ingredients:
            if ingredient.name == name:
                return ingredient
        return None

    def get(self, name: str) -> Ingredient:
        ingredient = self.find(name)
        if ingredient is None:
            raise NotFoundError(f"Ingredient '{name}' not found")
        return ingredient

    def lookup(self) -> dict[str, Decimal]:
        """The current name -> unit price table."""
        return build_price_lookup(self._ingredients)

    def add(self, data: IngredientCreate) -> Ingredient:
        """Add an ingredient. Names are unique; a duplicate is rejected."""
        if self.find(data.name) is not None:
            raise ConflictError(f"Ingredient '{data.name}' already exists")

        ingredient = Ingredient(**data.model_dump())
        if ingredient.product_price is not None and ingredient.product_quantity is not None:
            ingredient.unit_price = calculate_unit_price(
                ingredient.product_price, ingredient.product_quantity
            )

        self._ingredients.append(ingredient)
        logger.info(f"Added ingredient {ingredient.name} at {ingredient.unit_price} per unit")
        self._publish()
        return ingredient

    def update(self, name: str, data: IngredientUpdate) -> Ingredient:
        """
        Apply a partial update.

        Changing either product field recomputes unit_price from the merged
        product fields. Setting unit_price alone clears the product fields so
        the stored price is not contradicted by them.
        """
        current = self.get(name)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("unit_price", ...) is None:
            del changes["unit_price"]

        updated = current.model_copy(update=changes)
        if "product_price" in changes or "product_quantity" in changes:
            if updated.product_price is not None and updated.product_quantity is not None:
                updated.unit_price = calculate_unit_price(
                    updated.product_price, updated.product_quantity
                )
        elif "unit_price" in changes:
            updated.product_price = None
            updated.product_quantity = None

        index = self._ingredients.index(current)
        self._ingredients[index] = updated
        logger.info(f"Updated ingredient {name}: {current.unit_price} -> {updated.unit_price} per unit")
        self._publish()
        return updated

    def delete(self, name: str) -> None:
        """Remove an ingredient. Recipes that use it keep the line, unpriced."""
        ingredient = self.get(name)
        self._ingredients.remove(ingredient)
        logger.info(f"Deleted ingredient {name}")
        self._publish()

    def _publish(self) -> None:
        lookup = self.lookup()
        self.store.save(Document.KEY_INGREDIENT_PRICES, list[Ingredient], self._ingredients, commit=False)
        self.store.save(Document.KEY_INGREDIENT_LOOKUP, dict[str, Decimal], lookup)
        for callback in self._subscribers:
            callback(lookup)
