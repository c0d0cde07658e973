"""Base service for resources stored as sub-items of a per-patient document."""

from typing import Any, Dict, Optional

from services.embedded_items import EmbeddedItemRepository
from services.patient_access import PatientAccess
from utils.helpers import paginate_items, parse_object_id
from utils.logger import setup_logger

logger = setup_logger(__name__)


class PatientSubResourceService:
    """Ownership-checked add/get/patch/delete over one patient's sub-items.

    Subclasses only declare where the parent document lives and how it is
    labelled in error messages.
    """

    array_field: str = "items"
    back_reference: str = ""
    parent_label: str = "Document"
    item_label: str = "Item"
    invalid_item_message: str = "Invalid item id"
    paginate_by_default: bool = False

    def __init__(self, collection, patients_collection, default_page_size: int = 10):
        self.access = PatientAccess(patients_collection)
        self.items = EmbeddedItemRepository(
            collection,
            self.array_field,
            parent_label=self.parent_label,
            item_label=self.item_label,
        )
        self.default_page_size = default_page_size

    async def add(self, patient_id: str, user_id: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Append one sub-item, creating the parent on the patient's first entry."""
        patient = await self.access.require_owned_patient(patient_id, user_id)
        doc = await self.items.append(patient["_id"], item)
        if self.back_reference:
            await self.access.link_parent(patient["_id"], self.back_reference, doc["_id"])
        return self.items.present(doc)

    async def get(
        self,
        patient_id: str,
        user_id: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Parent document of the patient, paginated when configured or requested."""
        patient = await self.access.require_owned_patient(patient_id, user_id)
        doc = await self.items.get_by_owner(patient["_id"])

        if not (self.paginate_by_default or (page is not None and page_size is not None)):
            return self.items.present(doc)

        sliced = paginate_items(doc.get(self.array_field, []), page, page_size, self.default_page_size)
        response = self.items.present(doc, sliced.pop("items"))
        response.update(sliced)
        return response

    async def patch(
        self,
        patient_id: str,
        item_id: str,
        user_id: str,
        changes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Apply a partial update to one sub-item."""
        patient_oid = parse_object_id(patient_id, "Invalid patient id")
        item_oid = parse_object_id(item_id, self.invalid_item_message)
        await self.access.require_owned_patient(patient_oid, user_id)
        doc = await self.items.patch_item(patient_oid, item_oid, changes)
        return self.items.present(doc)

    async def delete(self, patient_id: str, item_id: str, user_id: str) -> Dict[str, Any]:
        """Remove one sub-item and return what is left."""
        patient_oid = parse_object_id(patient_id, "Invalid patient id")
        item_oid = parse_object_id(item_id, self.invalid_item_message)
        await self.access.require_owned_patient(patient_oid, user_id)
        doc = await self.items.remove_item(patient_oid, item_oid)
        return self.items.present(doc)
