"""Patient service: ownership-scoped patient records."""

import re
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from services.errors import ConflictError, NotFoundError
from services.patient_access import PatientAccess
from utils.helpers import parse_object_id, resolve_page, to_iso_utc, total_pages
from utils.logger import setup_logger

logger = setup_logger(__name__)


def _birth_datetime(value: Any) -> datetime:
    """Birth dates are stored as midnight UTC datetimes."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def _same_day(stored: Any, candidate: datetime) -> bool:
    return isinstance(stored, datetime) and stored.date() == candidate.date()


def present_patient(patient: Dict[str, Any]) -> Dict[str, Any]:
    """API shape of a stored patient."""
    response = {
        "id": str(patient["_id"]),
        "fullName": patient.get("fullName"),
        "gender": patient.get("gender"),
        "birthDate": to_iso_utc(patient.get("birthDate")),
        "phone": patient.get("phone"),
        "email": patient.get("email"),
    }
    if patient.get("leanBodyMass") is not None:
        response["leanBodyMass"] = patient["leanBodyMass"]
    return response


class PatientService:
    """Create, read, update, list and delete the caller's patients."""

    def __init__(
        self,
        patients_collection,
        meal_plans_collection,
        anamnesis_collection,
        energy_calculations_collection,
        default_page_size: int = 10,
    ):
        self.patients = patients_collection
        self.dependents = [meal_plans_collection, anamnesis_collection, energy_calculations_collection]
        self.access = PatientAccess(patients_collection)
        self.default_page_size = default_page_size

    async def _ensure_unique(self, field: str, value: Any, label: str, exclude_id: Optional[ObjectId] = None):
        query: Dict[str, Any] = {field: value}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        if await self.patients.find_one(query):
            raise ConflictError(f"{label} already registered")

    async def create(self, user_id: str, data: Dict[str, Any]) -> Dict[str, str]:
        """Register a patient for user_id; email and phone must be unused."""
        await self._ensure_unique("email", data["email"], "Email")
        await self._ensure_unique("phone", data["phone"], "Phone")

        now = datetime.now(timezone.utc)
        document = {
            "user": parse_object_id(user_id, "Invalid user id"),
            "fullName": data["fullName"],
            "gender": data["gender"],
            "birthDate": _birth_datetime(data["birthDate"]),
            "phone": data["phone"],
            "email": data["email"],
            "createdAt": now,
            "updatedAt": now,
        }
        if data.get("leanBodyMass") is not None:
            document["leanBodyMass"] = data["leanBodyMass"]

        try:
            result = await self.patients.insert_one(document)
        except DuplicateKeyError:
            raise ConflictError("Email or phone already registered")

        logger.info(f"Created patient {result.inserted_id} for user {user_id}")
        return {"id": str(result.inserted_id)}

    async def get(self, patient_id: str, user_id: str) -> Dict[str, Any]:
        patient = await self.access.require_owned_patient(patient_id, user_id)
        return present_patient(patient)

    async def update(self, patient_id: str, user_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Apply only the supplied fields that differ; returns the patient unchanged otherwise."""
        current = await self.access.require_owned_patient(patient_id, user_id)
        payload: Dict[str, Any] = {}

        for field in ("fullName", "gender", "leanBodyMass"):
            if field in changes and current.get(field) != changes[field]:
                payload[field] = changes[field]

        if "birthDate" in changes:
            birth = _birth_datetime(changes["birthDate"])
            if not _same_day(current.get("birthDate"), birth):
                payload["birthDate"] = birth

        if "phone" in changes and current.get("phone") != changes["phone"]:
            await self._ensure_unique("phone", changes["phone"], "Phone", current["_id"])
            payload["phone"] = changes["phone"]

        if "email" in changes and current.get("email") != changes["email"]:
            await self._ensure_unique("email", changes["email"], "Email", current["_id"])
            payload["email"] = changes["email"]

        if not payload:
            return present_patient(current)

        payload["updatedAt"] = datetime.now(timezone.utc)
        try:
            updated = await self.patients.find_one_and_update(
                {"_id": current["_id"]},
                {"$set": payload},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError("Email or phone already registered")
        if not updated:
            raise NotFoundError("Patient not found")

        logger.info(f"Updated patient {current['_id']}: {sorted(k for k in payload if k != 'updatedAt')}")
        return present_patient(updated)

    async def delete(self, patient_id: str, user_id: str) -> Dict[str, bool]:
        """Delete the patient together with its meal plans, anamnesis and energy calculations."""
        patient = await self.access.require_owned_patient(patient_id, user_id)
        result = await self.patients.delete_one({"_id": patient["_id"]})
        if result.deleted_count == 0:
            raise NotFoundError("Patient not found")

        for collection in self.dependents:
            await collection.delete_many({"patient": patient["_id"]})

        logger.info(f"Deleted patient {patient['_id']} and its dependent documents")
        return {"deleted": True}

    async def list(
        self,
        user_id: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Page of the caller's patients, newest first."""
        p, size = resolve_page(page, page_size, self.default_page_size)
        query: Dict[str, Any] = {"user": parse_object_id(user_id, "Invalid user id")}
        if name:
            query["fullName"] = {"$regex": re.escape(name), "$options": "i"}
        if email:
            query["email"] = {"$regex": re.escape(email), "$options": "i"}

        cursor = (
            self.patients.find(query)
            .sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            .skip((p - 1) * size)
            .limit(size)
        )
        patients = await cursor.to_list(length=size)
        total = await self.patients.count_documents(query)

        return {
            "page": p,
            "pageSize": size,
            "total": total,
            "totalPages": total_pages(total, size),
            "items": [present_patient(patient) for patient in patients],
        }
