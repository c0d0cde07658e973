"""Request/response schemas organized by collection type."""

from schemas.enums import (
    Role,
    Gender,
    Food,
    EnergyCalculationFormula,
    PhysicalActivityFactor,
    InjuryFactor,
)
from schemas.base import CamelModel, PartialUpdate
from schemas.user import RegisterRequest, LoginRequest, UserResponse, TokenResponse, CurrentUser
from schemas.patient import PatientCreate, PatientUpdate, PatientResponse, PatientCreated, PatientPage
from schemas.meal_plan import MealItem, Meal, DietPlan, DietPlanUpdate
from schemas.anamnesis import AnamnesisEntry, AnamnesisEntryUpdate
from schemas.energy_calculation import EnergyCalculationEntry, EnergyCalculationUpdate

__all__ = [
    "Role",
    "Gender",
    "Food",
    "EnergyCalculationFormula",
    "PhysicalActivityFactor",
    "InjuryFactor",
    "CamelModel",
    "PartialUpdate",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "TokenResponse",
    "CurrentUser",
    "PatientCreate",
    "PatientUpdate",
    "PatientResponse",
    "PatientCreated",
    "PatientPage",
    "MealItem",
    "Meal",
    "DietPlan",
    "DietPlanUpdate",
    "AnamnesisEntry",
    "AnamnesisEntryUpdate",
    "EnergyCalculationEntry",
    "EnergyCalculationUpdate",
]
