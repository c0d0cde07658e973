"""Meal plan service: diet plans embedded in one document per patient."""

from services.patient_resources import PatientSubResourceService


class MealPlanService(PatientSubResourceService):
    """Diet plans of a patient."""

    array_field = "plans"
    back_reference = "mealPlans"
    parent_label = "Meal plans"
    item_label = "Diet plan"
    invalid_item_message = "Invalid plan id"
