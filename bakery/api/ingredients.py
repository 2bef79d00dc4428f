"""Ingredient price catalog endpoints.

Ingredient names are free text and may contain "/", so the name routes use a
path parameter. The price lookup lives on its own router so no ingredient name
can shadow it.
"""
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from bakery.api.dependencies import get_catalog, get_recosting_catalog
from bakery.schemas.ingredient import Ingredient, IngredientCreate, IngredientList, IngredientUpdate
from bakery.services.errors import ConflictError, NotFoundError
from bakery.services.ingredient_catalog import IngredientCatalog

router = APIRouter(prefix="/ingredients", tags=["ingredients"])
lookup_router = APIRouter(prefix="/ingredient-lookup", tags=["ingredients"])


@lookup_router.get("", response_model=dict[str, Decimal])
def get_price_lookup(catalog: IngredientCatalog = Depends(get_catalog)):
    """The name -> unit price table used for recipe costing."""
    return catalog.lookup()


@router.get("", response_model=IngredientList)
def list_ingredients(catalog: IngredientCatalog = Depends(get_catalog)):
    """List all ingredient prices."""
    ingredients = catalog.list_all()
    return IngredientList(ingredients=ingredients, count=len(ingredients))


@router.get("/{name:path}", response_model=Ingredient)
def get_ingredient(name: str, catalog: IngredientCatalog = Depends(get_catalog)):
    try:
        return catalog.get(name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Ingredient, status_code=201)
def create_ingredient(data: IngredientCreate, catalog: IngredientCatalog = Depends(get_recosting_catalog)):
    """Add an ingredient. Every recipe is recosted."""
    try:
        return catalog.add(data)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch("/{name:path}", response_model=Ingredient)
def update_ingredient(
    name: str,
    data: IngredientUpdate,
    catalog: IngredientCatalog = Depends(get_recosting_catalog),
):
    """Update an ingredient's prices or labels. Every recipe is recosted."""
    try:
        return catalog.update(name, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{name:path}", status_code=204)
def delete_ingredient(name: str, catalog: IngredientCatalog = Depends(get_recosting_catalog)):
    """Delete an ingredient. Recipes using it keep the line, unpriced."""
    try:
        catalog.delete(name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
