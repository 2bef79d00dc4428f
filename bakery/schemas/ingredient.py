"""Pydantic schemas for the ingredient price catalog."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class IngredientBase(BaseModel):
    """Pricing fields shared by stored ingredients and requests."""

    unit_price: Decimal = Field(default=Decimal("0"), ge=0, description="Price per recipe unit")
    product_price: Optional[Decimal] = Field(None, ge=0, description="What the purchased product cost")
    product_quantity: Optional[Decimal] = Field(None, ge=0, description="How many recipe units the product holds")
    product_unit: Optional[str] = Field(None, max_length=20, description="e.g., '5 kg bag', 'dozen'")
    recipe_unit: Optional[str] = Field(None, max_length=20, description="e.g., 'kg', 'g', 'each'")


class Ingredient(IngredientBase):
    """An ingredient price record as stored in the catalog."""

    name: str = Field(..., min_length=1, max_length=100)


class IngredientCreate(IngredientBase):
    """Schema for adding an ingredient.

    When both product fields are given, unit_price is derived from them and
    any unit_price in the request is ignored.
    """

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class IngredientUpdate(BaseModel):
    """Schema for updating an ingredient. All fields optional, name is fixed."""

    unit_price: Optional[Decimal] = Field(None, ge=0)
    product_price: Optional[Decimal] = Field(None, ge=0)
    product_quantity: Optional[Decimal] = Field(None, ge=0)
    product_unit: Optional[str] = Field(None, max_length=20)
    recipe_unit: Optional[str] = Field(None, max_length=20)


class IngredientList(BaseModel):
    """Schema for list of ingredients."""

    ingredients: list[Ingredient]
    count: int
