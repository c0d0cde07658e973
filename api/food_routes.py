"""Food catalog routes."""

from fastapi import APIRouter

from services.errors import NotFoundError
from services.food_catalog import get_food, list_foods

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def get_foods():
    """List catalog foods with macros per 100 g."""
    return list_foods()


@router.get("/{food_id}")
async def get_food_by_id(food_id: str):
    """Single catalog food by id."""
    food = get_food(food_id)
    if food is None:
        raise NotFoundError("Food not found")
    return food
