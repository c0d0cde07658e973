"""Request-scoped dependencies: database handle, caller identity and services."""

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from config.settings import settings
from models.database import ANAMNESIS, ENERGY_CALCULATIONS, MEAL_PLANS, PATIENTS, USERS
from schemas.user import CurrentUser
from services.anamnesis_service import AnamnesisService
from services.auth_service import decode_access_token
from services.energy_calculation_service import EnergyCalculationService
from services.meal_plan_service import MealPlanService
from services.patient_service import PatientService
from services.user_service import UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_database(request: Request):
    """Database opened by the application lifespan."""
    return request.app.state.database.db


async def get_current_user(token: str = Depends(oauth2_scheme)) -> CurrentUser:
    """Resolve the bearer token to the calling user."""
    payload = decode_access_token(token)
    return CurrentUser(user_id=payload["sub"], email=payload.get("email", ""), role=payload.get("role", "user"))


def get_user_service(db=Depends(get_database)) -> UserService:
    return UserService(db[USERS])


def get_patient_service(db=Depends(get_database)) -> PatientService:
    return PatientService(
        db[PATIENTS],
        db[MEAL_PLANS],
        db[ANAMNESIS],
        db[ENERGY_CALCULATIONS],
        default_page_size=settings.default_page_size,
    )


def get_meal_plan_service(db=Depends(get_database)) -> MealPlanService:
    return MealPlanService(db[MEAL_PLANS], db[PATIENTS], settings.default_page_size)


def get_anamnesis_service(db=Depends(get_database)) -> AnamnesisService:
    return AnamnesisService(db[ANAMNESIS], db[PATIENTS], settings.default_page_size)


def get_energy_calculation_service(db=Depends(get_database)) -> EnergyCalculationService:
    return EnergyCalculationService(db[ENERGY_CALCULATIONS], db[PATIENTS], settings.default_page_size)
