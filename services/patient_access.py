"""Ownership checks shared by every patient-scoped resource."""

from typing import Any, Dict

from bson import ObjectId

from services.errors import ForbiddenError, NotFoundError
from utils.helpers import parse_object_id
from utils.logger import setup_logger

logger = setup_logger(__name__)


class PatientAccess:
    """Resolve a patient id to a patient the caller is allowed to touch."""

    def __init__(self, patients_collection):
        self.patients = patients_collection

    async def require_owned_patient(self, patient_id: Any, user_id: str) -> Dict[str, Any]:
        """Load the patient, enforcing id format, existence and ownership in that order."""
        patient_oid = parse_object_id(patient_id, "Invalid patient id")
        patient = await self.patients.find_one({"_id": patient_oid})
        if not patient:
            raise NotFoundError("Patient not found")
        if str(patient.get("user")) != str(user_id):
            logger.warning(f"User {user_id} denied access to patient {patient_oid}")
            raise ForbiddenError("Not allowed")
        return patient

    async def link_parent(self, patient_oid: ObjectId, field: str, parent_id: ObjectId) -> None:
        """Store the back-reference from a patient to one of its parent documents."""
        await self.patients.update_one({"_id": patient_oid}, {"$set": {field: parent_id}})
