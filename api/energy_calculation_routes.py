"""Energy calculation routes nested under a patient."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_current_user, get_energy_calculation_service
from schemas.energy_calculation import EnergyCalculationEntry, EnergyCalculationUpdate
from schemas.user import CurrentUser
from services.energy_calculation_service import EnergyCalculationService

router = APIRouter(prefix="/patients/{patient_id}/energy-calculations", tags=["energy-calculations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_energy_calculation(
    patient_id: str,
    body: EnergyCalculationEntry,
    current_user: CurrentUser = Depends(get_current_user),
    service: EnergyCalculationService = Depends(get_energy_calculation_service),
):
    """Record energy calculation inputs for the patient."""
    return await service.add(patient_id, current_user.user_id, body.to_document())


@router.get("")
async def get_energy_calculations(
    patient_id: str,
    page: Optional[int] = Query(None, ge=1, description="Page number, defaults to 1"),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize", description="Items per page, defaults to 10"),
    current_user: CurrentUser = Depends(get_current_user),
    service: EnergyCalculationService = Depends(get_energy_calculation_service),
):
    """Paginated energy calculations of the patient."""
    return await service.get(patient_id, current_user.user_id, page, page_size)


@router.patch("/{calculation_id}")
async def update_energy_calculation(
    patient_id: str,
    calculation_id: str,
    body: EnergyCalculationUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: EnergyCalculationService = Depends(get_energy_calculation_service),
):
    return await service.patch(patient_id, calculation_id, current_user.user_id, body.changes())


@router.delete("/{calculation_id}")
async def delete_energy_calculation(
    patient_id: str,
    calculation_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: EnergyCalculationService = Depends(get_energy_calculation_service),
):
    return await service.delete(patient_id, calculation_id, current_user.user_id)
