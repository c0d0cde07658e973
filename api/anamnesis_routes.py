"""Anamnesis routes nested under a patient."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_anamnesis_service, get_current_user
from schemas.anamnesis import AnamnesisEntry, AnamnesisEntryUpdate
from schemas.user import CurrentUser
from services.anamnesis_service import AnamnesisService

router = APIRouter(prefix="/patients/{patient_id}/anamnesis", tags=["anamnesis"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_anamnesis_item(
    patient_id: str,
    body: AnamnesisEntry,
    current_user: CurrentUser = Depends(get_current_user),
    service: AnamnesisService = Depends(get_anamnesis_service),
):
    """Append an anamnesis entry and return all entries."""
    return await service.add(patient_id, current_user.user_id, body.to_document())


@router.get("")
async def get_anamnesis(
    patient_id: str,
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    current_user: CurrentUser = Depends(get_current_user),
    service: AnamnesisService = Depends(get_anamnesis_service),
):
    """Anamnesis of the patient; paginated when both page and pageSize are given."""
    return await service.get(patient_id, current_user.user_id, page, page_size)


@router.patch("/{item_id}")
async def update_anamnesis_item(
    patient_id: str,
    item_id: str,
    body: AnamnesisEntryUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: AnamnesisService = Depends(get_anamnesis_service),
):
    """Update only the supplied fields; returns the current state when nothing changed."""
    return await service.patch(patient_id, item_id, current_user.user_id, body.changes())


@router.delete("/{item_id}")
async def delete_anamnesis_item(
    patient_id: str,
    item_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: AnamnesisService = Depends(get_anamnesis_service),
):
    return await service.delete(patient_id, item_id, current_user.user_id)
