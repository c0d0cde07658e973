"""Meal plan routes nested under a patient."""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_current_user, get_meal_plan_service
from schemas.meal_plan import DietPlan, DietPlanUpdate
from schemas.user import CurrentUser
from services.meal_plan_service import MealPlanService

router = APIRouter(prefix="/patients/{patient_id}/meal-plans", tags=["meal-plans"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_diet_plan(
    patient_id: str,
    body: DietPlan,
    current_user: CurrentUser = Depends(get_current_user),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """Append a diet plan, creating the patient's meal plans on first use."""
    return await service.add(patient_id, current_user.user_id, body.to_document())


@router.get("")
async def get_meal_plans(
    patient_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.get(patient_id, current_user.user_id)


@router.patch("/{plan_id}")
async def update_diet_plan(
    patient_id: str,
    plan_id: str,
    body: DietPlanUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """Update only the supplied fields of one diet plan."""
    return await service.patch(patient_id, plan_id, current_user.user_id, body.changes())


@router.delete("/{plan_id}")
async def delete_diet_plan(
    patient_id: str,
    plan_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return await service.delete(patient_id, plan_id, current_user.user_id)
