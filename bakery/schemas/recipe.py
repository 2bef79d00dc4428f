"""Pydantic schemas for recipes and their cost breakdowns."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Recipe Schemas
# ============================================================================


class RecipeIngredientUsage(BaseModel):
    """One ingredient line of a recipe, referencing the catalog by name."""

    ingredient_name: str = Field(..., max_length=100)
    quantity: Decimal = Field(default=Decimal("0"), ge=0, description="Amount in the ingredient's recipe unit")
    unit: str = Field(default="", max_length=20, description="Display only, no conversion is done")


class RecipeBase(BaseModel):
    """Base recipe fields."""

    name: str = Field(..., min_length=1, max_length=100)
    ingredients: list[RecipeIngredientUsage] = []
    sale_price: Optional[Decimal] = Field(None, description="Suggested sale price, None when unset")

    @field_validator("sale_price")
    @classmethod
    def unset_non_positive_price(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        # A zero or negative sale price means no price has been set
        if v is not None and v <= 0:
            return None
        return v


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe."""

    pass


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe's editable fields."""

    pass


class Recipe(RecipeBase):
    """A recipe as stored, with its derived cost."""

    id: str
    cost: Decimal = Decimal("0")
    created_at: datetime
    updated_at: datetime


class RecipeList(BaseModel):
    """Schema for list of recipes."""

    recipes: list[Recipe]
    count: int


# ============================================================================
# Cost Calculation Schemas
# ============================================================================


class IngredientCostLine(BaseModel):
    """Cost for a single ingredient line in a recipe."""

    ingredient_name: str
    quantity: Decimal
    unit: str = ""
    unit_price: Optional[Decimal] = None
    line_cost: Decimal = Decimal("0")
    has_price: bool = False


class RecipeCostBreakdown(BaseModel):
    """Full cost breakdown for a recipe."""

    recipe_id: Optional[str] = None
    recipe_name: Optional[str] = None
    lines: list[IngredientCostLine] = []
    total_cost: Decimal = Decimal("0")
    has_unpriced_ingredients: bool = False
    unpriced_count: int = 0
    sale_price: Optional[Decimal] = None
    gross_profit: Optional[Decimal] = None
    food_cost_percent: Optional[Decimal] = None
