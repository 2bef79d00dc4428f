"""Cost calculation for ingredients, recipes and sales.

All functions here are pure: they take the current price lookup (or the
current recipes) and return derived values. Nothing is rounded; amounts are
exact Decimal arithmetic and rounding is left to whoever displays them.
"""
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from bakery.schemas.ingredient import Ingredient
from bakery.schemas.recipe import IngredientCostLine, Recipe, RecipeCostBreakdown, RecipeIngredientUsage
from bakery.schemas.sale import SaleItem, SaleItemDraft

ZERO = Decimal("0")


def calculate_unit_price(
    product_price: Optional[Decimal],
    product_quantity: Optional[Decimal],
) -> Decimal:
    """
    Price per recipe unit from what the product cost and how much it holds.

    A 5 kg bag of flour bought for 10.00 gives 10.00 / 5 = 2.00 per kg.
    Returns 0 when the quantity is missing or not positive.
    """
    if product_price is None or product_quantity is None or product_quantity <= 0:
        return ZERO
    return Decimal(product_price) / Decimal(product_quantity)


def build_price_lookup(ingredients: Iterable[Ingredient]) -> dict[str, Decimal]:
    """Build the name -> unit price table that recipe costing reads."""
    return {ingredient.name: ingredient.unit_price for ingredient in ingredients}


def calculate_recipe_cost(
    ingredients: Iterable[RecipeIngredientUsage],
    lookup: Mapping[str, Decimal],
) -> RecipeCostBreakdown:
    """
    Cost a recipe's ingredient lines against the price lookup.

    total = sum(quantity * unit_price) over the lines. A name missing from
    the lookup contributes 0 and is flagged with has_price=False.
    """
    lines = []
    total = ZERO
    unpriced_count = 0

    for usage in ingredients:
        unit_price = lookup.get(usage.ingredient_name)
        has_price = unit_price is not None

        line_cost = ZERO
        if has_price:
            line_cost = Decimal(unit_price) * usage.quantity
            total += line_cost
        else:
            unpriced_count += 1

        lines.append(IngredientCostLine(
            ingredient_name=usage.ingredient_name,
            quantity=usage.quantity,
            unit=usage.unit,
            unit_price=unit_price,
            line_cost=line_cost,
            has_price=has_price,
        ))

    return RecipeCostBreakdown(
        lines=lines,
        total_cost=total,
        has_unpriced_ingredients=unpriced_count > 0,
        unpriced_count=unpriced_count,
    )


def calculate_margin(
    cost: Decimal,
    sale_price: Optional[Decimal],
) -> tuple[Optional[Decimal], Optional[Decimal]]:
    """
    Gross profit and food cost percent for a recipe sold at sale_price.

    Returns (None, None) when no sale price is set.
    """
    if sale_price is None or sale_price <= 0:
        return None, None
    gross_profit = sale_price - cost
    food_cost_percent = (cost / sale_price * 100).quantize(Decimal("0.1"))
    return gross_profit, food_cost_percent


def effective_unit_price(unit_sale_price: Decimal, recipe: Optional[Recipe]) -> Decimal:
    """The price charged per unit, falling back to the recipe cost when unset."""
    if unit_sale_price > 0:
        return unit_sale_price
    if recipe is not None:
        return recipe.cost
    return ZERO


def calculate_sale_total(
    items: Iterable[SaleItem | SaleItemDraft],
    recipes_by_id: Mapping[str, Recipe],
) -> Decimal:
    """Sum of effective unit price * quantity over the sale lines."""
    total = ZERO
    for item in items:
        unit = effective_unit_price(item.unit_sale_price, recipes_by_id.get(item.recipe_id))
        total += unit * item.quantity
    return total
