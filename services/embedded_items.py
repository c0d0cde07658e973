"""Embedded sub-item repository.

A parent document exists at most once per owner (patient) and holds an
ordered array of sub-items, each carrying an ``_id`` assigned on insertion.
This module owns the four operations every such resource needs:

* ``append``  - create-parent-if-absent and push in one atomic upsert
* ``patch_item`` - diff a partial update against the stored sub-item and
  apply a targeted positional ``$set`` only for fields that changed
* ``remove_item`` - pull one sub-item by id
* ``find_by_owner`` / ``get_by_owner`` - snapshot reads

Sub-items written before ids were normalized may hold their ``_id`` as a
plain string. They are still found by ``ids_match`` but not by a typed
query predicate, so ``patch_item`` falls back to a repair pass that
rewrites the array with ObjectId ids, guarded by the snapshot it was
computed from, before retrying.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from services.errors import NotFoundError
from utils.helpers import ids_match, is_valid_object_id, serialize_document
from utils.logger import setup_logger

logger = setup_logger(__name__)

# Repair passes allowed when the array keeps changing underneath a patch.
REPAIR_ATTEMPTS = 2


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def find_item(items: Optional[List[Dict[str, Any]]], item_id: Any) -> Optional[Dict[str, Any]]:
    """Return the sub-item whose id equals item_id by normalized value."""
    for item in items or []:
        if ids_match(item.get("_id"), item_id):
            return item
    return None


def compute_item_diff(current: Optional[Dict[str, Any]], changes: Dict[str, Any]) -> Dict[str, Any]:
    """Fields of changes that differ from current.

    Values are compared structurally, so a list of meals equal in content to
    the stored one is not a change. When the sub-item is unknown every
    supplied field is kept.
    """
    if current is None:
        return dict(changes)
    return {field: value for field, value in changes.items() if current.get(field) != value}


def normalize_item_ids(items: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Copy of items where every ``_id`` is an ObjectId.

    Hex-string ids keep their value; missing or malformed ids get a fresh one.
    """
    normalized = []
    for item in items or []:
        raw_id = item.get("_id")
        if isinstance(raw_id, ObjectId):
            item_id = raw_id
        elif is_valid_object_id(raw_id):
            item_id = ObjectId(raw_id)
        else:
            item_id = ObjectId()
        normalized.append({**item, "_id": item_id})
    return normalized


class EmbeddedItemRepository:
    """Append/patch/remove sub-items inside a per-owner parent document."""

    def __init__(
        self,
        collection,
        array_field: str,
        owner_field: str = "patient",
        parent_label: str = "Document",
        item_label: str = "Item",
    ):
        self.collection = collection
        self.array_field = array_field
        self.owner_field = owner_field
        self.parent_label = parent_label
        self.item_label = item_label

    def _parent_missing(self) -> NotFoundError:
        return NotFoundError(f"{self.parent_label} not found for patient")

    def _item_missing(self) -> NotFoundError:
        return NotFoundError(f"{self.item_label} not found for patient")

    async def find_by_owner(self, owner_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Current parent document for owner, or None."""
        return await self.collection.find_one({self.owner_field: owner_id})

    async def get_by_owner(self, owner_id: ObjectId) -> Dict[str, Any]:
        """Current parent document for owner; raises NotFoundError if absent."""
        doc = await self.find_by_owner(owner_id)
        if not doc:
            raise self._parent_missing()
        return doc

    async def append(self, owner_id: ObjectId, item: Dict[str, Any]) -> Dict[str, Any]:
        """Push a new sub-item, creating the parent document on first use."""
        new_item = {"_id": ObjectId(), **{k: v for k, v in item.items() if k != "_id"}}
        now = _utcnow()
        query = {self.owner_field: owner_id}
        update = {
            "$setOnInsert": {self.owner_field: owner_id, "createdAt": now},
            "$push": {self.array_field: new_item},
            "$set": {"updatedAt": now},
        }

        try:
            doc = await self.collection.find_one_and_update(
                query, update, upsert=True, return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError:
            # Lost a first-insert race on the unique owner index; the parent exists now.
            logger.info(f"Concurrent parent creation for {self.owner_field}={owner_id}, retrying push")
            doc = await self.collection.find_one_and_update(
                query, update, upsert=True, return_document=ReturnDocument.AFTER
            )

        if not doc:
            raise NotFoundError(f"Failed to create or update {self.parent_label.lower()}")

        logger.info(f"Appended {self.array_field} item {new_item['_id']} for {self.owner_field}={owner_id}")
        return doc

    async def _set_on_item(
        self,
        parent_query: Dict[str, Any],
        item_id: ObjectId,
        set_payload: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Targeted positional update; None when no array element matched."""
        result = await self.collection.update_one(
            {**parent_query, f"{self.array_field}._id": item_id},
            {"$set": set_payload},
        )
        if result.matched_count == 0:
            return None
        return await self.collection.find_one(parent_query)

    async def repair_item_ids(self, doc: Dict[str, Any]) -> bool:
        """Rewrite the sub-item array with normalized ObjectId ids.

        The rewrite only applies while the stored array still equals the
        snapshot in doc; returns False when it was changed in the meantime.
        """
        normalized = normalize_item_ids(doc.get(self.array_field))
        result = await self.collection.update_one(
            {"_id": doc["_id"], self.array_field: doc.get(self.array_field)},
            {"$set": {self.array_field: normalized, "updatedAt": _utcnow()}},
        )
        if result.matched_count == 0:
            logger.info(f"{self.array_field} changed on {self.parent_label.lower()} {doc['_id']}, repair skipped")
            return False
        logger.warning(
            f"Normalized {len(normalized)} {self.array_field} ids on {self.parent_label.lower()} {doc['_id']}"
        )
        return True

    async def _repair_and_retry(
        self,
        owner_id: ObjectId,
        doc: Dict[str, Any],
        item_id: ObjectId,
        set_payload: Dict[str, Any],
    ) -> Dict[str, Any]:
        for _ in range(REPAIR_ATTEMPTS):
            if await self.repair_item_ids(doc):
                updated = await self._set_on_item({"_id": doc["_id"]}, item_id, set_payload)
                if updated is None:
                    raise self._item_missing()
                return updated

            doc = await self.get_by_owner(owner_id)
            if find_item(doc.get(self.array_field), item_id) is None:
                raise self._item_missing()
            updated = await self._set_on_item({"_id": doc["_id"]}, item_id, set_payload)
            if updated is not None:
                return updated
        raise self._item_missing()

    async def patch_item(
        self,
        owner_id: ObjectId,
        item_id: ObjectId,
        changes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Apply only the changed fields of one sub-item.

        Returns the stored snapshot untouched, without writing, when nothing
        differs. Otherwise issues one positional ``$set``. If that misses an
        item present in the snapshot (a legacy string id), the array is
        repaired and the update retried; an item absent from the snapshot is
        reported missing without any further write.
        """
        current_doc = await self.get_by_owner(owner_id)
        current_item = find_item(current_doc.get(self.array_field), item_id)

        diff = compute_item_diff(current_item, changes)
        if not diff:
            logger.info(f"No changes for {self.array_field} item {item_id}, skipping write")
            return current_doc

        set_payload = {f"{self.array_field}.$.{field}": value for field, value in diff.items()}
        set_payload["updatedAt"] = _utcnow()

        updated = await self._set_on_item({self.owner_field: owner_id}, item_id, set_payload)
        if updated is None:
            if current_item is None:
                raise self._item_missing()
            logger.warning(f"Targeted update missed {self.array_field} item {item_id}, running repair pass")
            updated = await self._repair_and_retry(owner_id, current_doc, item_id, set_payload)

        logger.info(f"Patched {sorted(diff)} on {self.array_field} item {item_id}")
        return updated

    async def remove_item(self, owner_id: ObjectId, item_id: ObjectId) -> Dict[str, Any]:
        """Pull one sub-item and return the remaining document."""
        current_doc = await self.get_by_owner(owner_id)
        if find_item(current_doc.get(self.array_field), item_id) is None:
            raise self._item_missing()

        updated = await self.collection.find_one_and_update(
            {self.owner_field: owner_id},
            {
                # Legacy sub-items may still carry the string form of the id.
                "$pull": {self.array_field: {"_id": {"$in": [item_id, str(item_id)]}}},
                "$set": {"updatedAt": _utcnow()},
            },
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise self._parent_missing()

        logger.info(f"Removed {self.array_field} item {item_id} for {self.owner_field}={owner_id}")
        return updated

    def present(self, doc: Dict[str, Any], items: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        """API shape of a parent document: id, patientId and its sub-items."""
        return {
            "id": str(doc["_id"]),
            "patientId": str(doc[self.owner_field]),
            self.array_field: serialize_document(doc.get(self.array_field, []) if items is None else items),
        }
