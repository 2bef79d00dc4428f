"""Recipe CRUD and costing endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from bakery.api.dependencies import get_recipe_book
from bakery.schemas.recipe import Recipe, RecipeCostBreakdown, RecipeCreate, RecipeList, RecipeUpdate
from bakery.services.errors import NotFoundError
from bakery.services.recipe_book import RecipeBook

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=RecipeList)
def list_recipes(recipes: RecipeBook = Depends(get_recipe_book)):
    """List all recipes with their current cost."""
    items = recipes.list_all()
    return RecipeList(recipes=items, count=len(items))


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str, recipes: RecipeBook = Depends(get_recipe_book)):
    try:
        return recipes.get(recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{recipe_id}/cost", response_model=RecipeCostBreakdown)
def get_recipe_cost(recipe_id: str, recipes: RecipeBook = Depends(get_recipe_book)):
    """
    Get cost breakdown for a recipe.

    Lines whose ingredient has no price come back with has_price=false and
    contribute nothing to the total.
    """
    try:
        return recipes.cost_breakdown(recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Recipe, status_code=201)
def create_recipe(data: RecipeCreate, recipes: RecipeBook = Depends(get_recipe_book)):
    return recipes.create(data)


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: str,
    data: RecipeUpdate,
    recipes: RecipeBook = Depends(get_recipe_book),
):
    try:
        return recipes.update(recipe_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: str, recipes: RecipeBook = Depends(get_recipe_book)):
    try:
        recipes.delete(recipe_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
