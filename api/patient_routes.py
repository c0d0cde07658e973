"""Patient routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_current_user, get_patient_service
from schemas.patient import PatientCreate, PatientCreated, PatientPage, PatientResponse, PatientUpdate
from schemas.user import CurrentUser
from services.patient_service import PatientService

router = APIRouter(prefix="/patients", tags=["patients"])


@router.post("", response_model=PatientCreated, status_code=status.HTTP_201_CREATED)
async def create_patient(
    body: PatientCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service),
):
    """Register a patient owned by the caller."""
    return await service.create(current_user.user_id, body.to_document())


@router.get("", response_model=PatientPage, response_model_by_alias=True)
async def list_patients(
    page: Optional[int] = Query(None, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize", description="Items per page"),
    name: Optional[str] = Query(None, description="Case-insensitive partial match on full name"),
    email: Optional[str] = Query(None, description="Case-insensitive partial match on email"),
    current_user: CurrentUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service),
):
    """Page of the caller's patients, newest first."""
    return await service.list(current_user.user_id, page, page_size, name=name, email=email)


@router.get("/{patient_id}", response_model=PatientResponse, response_model_exclude_none=True)
async def get_patient(
    patient_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service),
):
    return await service.get(patient_id, current_user.user_id)


@router.patch("/{patient_id}", response_model=PatientResponse, response_model_exclude_none=True)
async def update_patient(
    patient_id: str,
    body: PatientUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service),
):
    """Update the supplied fields; nothing is written when they already match."""
    return await service.update(patient_id, current_user.user_id, body.changes())


@router.delete("/{patient_id}")
async def delete_patient(
    patient_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: PatientService = Depends(get_patient_service),
):
    """Delete a patient and everything recorded for it."""
    return await service.delete(patient_id, current_user.user_id)
