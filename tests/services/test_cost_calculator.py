"""Tests for bakery/services/cost_calculator.py - pure cost arithmetic."""
from datetime import datetime, timezone
from decimal import Decimal

from bakery.schemas.ingredient import Ingredient
from bakery.schemas.recipe import Recipe, RecipeIngredientUsage
from bakery.schemas.sale import SaleItemDraft
from bakery.services.cost_calculator import (
    build_price_lookup,
    calculate_margin,
    calculate_recipe_cost,
    calculate_sale_total,
    calculate_unit_price,
    effective_unit_price,
)


def usage(name, quantity, unit=""):
    return RecipeIngredientUsage(ingredient_name=name, quantity=Decimal(quantity), unit=unit)


def make_recipe(recipe_id="r1", name="Bread", cost="1.50"):
    now = datetime(2025, 3, 14, tzinfo=timezone.utc)
    return Recipe(id=recipe_id, name=name, cost=Decimal(cost), created_at=now, updated_at=now)


# ============================================================================
# calculate_unit_price
# ============================================================================


class TestCalculateUnitPrice:
    def test_divides_price_by_quantity(self):
        assert calculate_unit_price(Decimal("10.00"), Decimal("5")) == Decimal("2.00")

    def test_non_terminating_division_is_exact_to_context(self):
        price = calculate_unit_price(Decimal("10"), Decimal("3"))
        assert abs(price * 3 - Decimal("10")) < Decimal("0.0000001")

    def test_zero_quantity_gives_zero(self):
        assert calculate_unit_price(Decimal("10.00"), Decimal("0")) == Decimal("0")

    def test_negative_quantity_gives_zero(self):
        assert calculate_unit_price(Decimal("10.00"), Decimal("-1")) == Decimal("0")

    def test_missing_fields_give_zero(self):
        assert calculate_unit_price(None, Decimal("5")) == Decimal("0")
        assert calculate_unit_price(Decimal("5"), None) == Decimal("0")


# ============================================================================
# calculate_recipe_cost
# ============================================================================


class TestCalculateRecipeCost:
    def test_single_ingredient(self):
        breakdown = calculate_recipe_cost([usage("Flour", "0.5")], {"Flour": Decimal("2.00")})
        assert breakdown.total_cost == Decimal("1.00")
        assert breakdown.has_unpriced_ingredients is False
        assert breakdown.lines[0].line_cost == Decimal("1.00")
        assert breakdown.lines[0].has_price is True

    def test_exact_sum_over_lines(self):
        lookup = {"Flour": Decimal("2.00"), "Butter": Decimal("8.40"), "Sugar": Decimal("1.15")}
        lines = [usage("Flour", "0.5"), usage("Butter", "0.25"), usage("Sugar", "0.3")]

        breakdown = calculate_recipe_cost(lines, lookup)

        expected = Decimal("2.00") * Decimal("0.5") + Decimal("8.40") * Decimal("0.25") + Decimal("1.15") * Decimal("0.3")
        assert breakdown.total_cost == expected

    def test_missing_ingredient_contributes_zero_and_is_flagged(self):
        lines = [usage("Flour", "1"), usage("Saffron", "0.01")]
        breakdown = calculate_recipe_cost(lines, {"Flour": Decimal("2.00")})

        assert breakdown.total_cost == Decimal("2.00")
        assert breakdown.has_unpriced_ingredients is True
        assert breakdown.unpriced_count == 1
        saffron = breakdown.lines[1]
        assert saffron.has_price is False
        assert saffron.unit_price is None
        assert saffron.line_cost == Decimal("0")

    def test_empty_recipe_costs_nothing(self):
        breakdown = calculate_recipe_cost([], {"Flour": Decimal("2.00")})
        assert breakdown.total_cost == Decimal("0")
        assert breakdown.lines == []

    def test_keeps_line_order_and_units(self):
        lines = [usage("Eggs", "3", "each"), usage("Flour", "0.5", "kg")]
        breakdown = calculate_recipe_cost(lines, {})
        assert [line.ingredient_name for line in breakdown.lines] == ["Eggs", "Flour"]
        assert [line.unit for line in breakdown.lines] == ["each", "kg"]

    def test_lookup_is_case_sensitive(self):
        breakdown = calculate_recipe_cost([usage("flour", "1")], {"Flour": Decimal("2.00")})
        assert breakdown.has_unpriced_ingredients is True


class TestBuildPriceLookup:
    def test_maps_names_to_unit_prices(self):
        ingredients = [
            Ingredient(name="Flour", unit_price=Decimal("2.00")),
            Ingredient(name="Sugar", unit_price=Decimal("1.10")),
        ]
        assert build_price_lookup(ingredients) == {"Flour": Decimal("2.00"), "Sugar": Decimal("1.10")}


class TestCalculateMargin:
    def test_profit_and_food_cost_percent(self):
        profit, percent = calculate_margin(Decimal("1.50"), Decimal("5.00"))
        assert profit == Decimal("3.50")
        assert percent == Decimal("30.0")

    def test_no_sale_price(self):
        assert calculate_margin(Decimal("1.50"), None) == (None, None)

    def test_zero_sale_price_means_unset(self):
        assert calculate_margin(Decimal("1.50"), Decimal("0")) == (None, None)


# ============================================================================
# Sale totals
# ============================================================================


class TestSaleTotal:
    def test_quantity_times_price(self):
        items = [SaleItemDraft(recipe_id="r1", quantity=2, unit_sale_price=Decimal("5.00"))]
        assert calculate_sale_total(items, {}) == Decimal("10.00")

    def test_falls_back_to_recipe_cost_when_price_unset(self):
        recipe = make_recipe(cost="1.50")
        items = [SaleItemDraft(recipe_id="r1", quantity=4, unit_sale_price=Decimal("0"))]
        assert calculate_sale_total(items, {"r1": recipe}) == Decimal("6.00")

    def test_unknown_recipe_without_price_counts_zero(self):
        items = [SaleItemDraft(recipe_id="gone", quantity=4, unit_sale_price=Decimal("0"))]
        assert calculate_sale_total(items, {}) == Decimal("0")

    def test_effective_unit_price_prefers_sale_price(self):
        recipe = make_recipe(cost="1.50")
        assert effective_unit_price(Decimal("4.00"), recipe) == Decimal("4.00")
        assert effective_unit_price(Decimal("0"), recipe) == Decimal("1.50")
