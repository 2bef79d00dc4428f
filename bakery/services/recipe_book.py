"""Recipe repository with cost kept in step with the ingredient catalog."""
import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Mapping, Optional

from bakery.models import Document
from bakery.schemas.recipe import Recipe, RecipeCostBreakdown, RecipeCreate, RecipeUpdate
from bakery.services.cost_calculator import calculate_margin, calculate_recipe_cost
from bakery.services.document_store import DocumentStore
from bakery.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class RecipeBook:
    """Stores recipes and recomputes their cost.

    Cost is recomputed when a recipe is saved and, for every recipe, when the
    catalog publishes a new price lookup (see recalculate_all).
    """

    def __init__(self, store: DocumentStore, lookup: Optional[Mapping[str, Decimal]] = None):
        self.store = store
        self._recipes: list[Recipe] = store.load(Document.KEY_RECIPES, list[Recipe], list)
        if lookup is None:
            lookup = store.load(Document.KEY_INGREDIENT_LOOKUP, dict[str, Decimal], dict)
        self._lookup = dict(lookup)

    def list_all(self) -> list[Recipe]:
        return list(self._recipes)

    def by_id(self) -> dict[str, Recipe]:
        return {recipe.id: recipe for recipe in self._recipes}

    def find(self, recipe_id: str) -> Recipe | None:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def get(self, recipe_id: str) -> Recipe:
        recipe = self.find(recipe_id)
        if recipe is None:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        return recipe

    def create(self, data: RecipeCreate) -> Recipe:
        now = datetime.now(timezone.utc)
        recipe = Recipe(
            id=uuid.uuid4().hex,
            name=data.name,
            ingredients=data.ingredients,
            sale_price=data.sale_price,
            cost=calculate_recipe_cost(data.ingredients, self._lookup).total_cost,
            created_at=now,
            updated_at=now,
        )
        self._recipes.append(recipe)
        self._save()
        logger.info(f"Created recipe {recipe.name} ({recipe.id}) costing {recipe.cost}")
        return recipe

    def update(self, recipe_id: str, data: RecipeUpdate) -> Recipe:
        current = self.get(recipe_id)
        updated = current.model_copy(update={
            "name": data.name,
            "ingredients": data.ingredients,
            "sale_price": data.sale_price,
            "cost": calculate_recipe_cost(data.ingredients, self._lookup).total_cost,
            "updated_at": datetime.now(timezone.utc),
        })
        self._recipes[self._recipes.index(current)] = updated
        self._save()
        logger.info(f"Updated recipe {updated.name} ({recipe_id}) costing {updated.cost}")
        return updated

    def delete(self, recipe_id: str) -> None:
        recipe = self.get(recipe_id)
        self._recipes.remove(recipe)
        self._save()
        logger.info(f"Deleted recipe {recipe.name} ({recipe_id})")

    def cost_breakdown(self, recipe_id: str) -> RecipeCostBreakdown:
        """Per-line costs for a recipe plus margin against its sale price."""
        recipe = self.get(recipe_id)
        breakdown = calculate_recipe_cost(recipe.ingredients, self._lookup)
        gross_profit, food_cost_percent = calculate_margin(breakdown.total_cost, recipe.sale_price)
        return breakdown.model_copy(update={
            "recipe_id": recipe.id,
            "recipe_name": recipe.name,
            "sale_price": recipe.sale_price,
            "gross_profit": gross_profit,
            "food_cost_percent": food_cost_percent,
        })

    def recalculate_all(self, lookup: Mapping[str, Decimal]) -> None:
        """Recompute every recipe's cost against a new price lookup."""
        self._lookup = dict(lookup)
        self._recipes = [
            recipe.model_copy(update={
                "cost": calculate_recipe_cost(recipe.ingredients, self._lookup).total_cost,
            })
            for recipe in self._recipes
        ]
        self._save()
        logger.info(f"Recalculated cost for {len(self._recipes)} recipes")

    def _save(self) -> None:
        self.store.save(Document.KEY_RECIPES, list[Recipe], self._recipes)
