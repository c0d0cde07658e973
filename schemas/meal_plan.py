"""Meal plan collection schemas."""

from typing import List, Optional

from pydantic import Field

from schemas.base import CamelModel, PartialUpdate, TrimmedText
from schemas.enums import Food

MILITARY_TIME = r"^([01]\d|2[0-3]):[0-5]\d$"


class MealItem(CamelModel):
    """Nested model for one food portion in a meal."""
    food_id: Food = Field(..., description="Food catalog identifier")
    quantity_grams: float = Field(..., ge=0, description="Portion size in grams")


class Meal(CamelModel):
    """Nested model for a meal inside a diet plan."""
    name: TrimmedText = Field(..., description="Meal name")
    time: str = Field(..., pattern=MILITARY_TIME, description="Meal time as HH:mm")
    items: List[MealItem] = Field(default_factory=list, description="Foods and portions")


class DietPlan(CamelModel):
    """Diet plan appended to a patient's meal plans."""
    title: TrimmedText = Field(..., description="Diet plan title")
    meals: List[Meal] = Field(default_factory=list, description="Meals of the plan")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Cutting plan",
                "meals": [
                    {
                        "name": "Breakfast",
                        "time": "08:00",
                        "items": [
                            {"foodId": "oats", "quantityGrams": 60},
                            {"foodId": "skim_milk", "quantityGrams": 200},
                        ],
                    }
                ],
            }
        }
    }


class DietPlanUpdate(PartialUpdate):
    """Partial update of a diet plan; meals, when sent, replace the whole list."""
    title: Optional[TrimmedText] = Field(None, description="Diet plan title")
    meals: Optional[List[Meal]] = Field(None, description="Replacement meals")
