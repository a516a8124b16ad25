from __future__ import annotations

import logging

from bson import ObjectId
from pymongo.collection import Collection

from timetable_data.core.errors import InvalidIdentifier
from timetable_data.models import Timetable

logger = logging.getLogger(__name__)


def parse_object_id(timetable_id: str) -> ObjectId:
    """Parse a 24-character hex id; raise InvalidIdentifier otherwise."""
    if not isinstance(timetable_id, str) or not ObjectId.is_valid(timetable_id):
        raise InvalidIdentifier(str(timetable_id))
    return ObjectId(timetable_id)


class TimetableStore:
    """
    CRUD access to the timetable collection.

    Identifiers are validated before any query is sent. Errors raised by
    pymongo are not caught here.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def list_all(self) -> list[Timetable]:
        return [Timetable.from_document(doc) for doc in self.collection.find({})]

    def get_by_id(self, timetable_id: str) -> Timetable | None:
        oid = parse_object_id(timetable_id)
        doc = self.collection.find_one({"_id": oid})
        if doc is None:
            return None
        return Timetable.from_document(doc)

    def create(self, timetable: Timetable) -> Timetable:
        doc = timetable.to_document()
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.debug("Inserted timetable %s", result.inserted_id)
        return Timetable.from_document(doc)

    def update(self, timetable_id: str, timetable: Timetable) -> Timetable | None:
        """
        Replace the whole document, keeping its `_id`.

        Returns None when no document has this id. An update that leaves the
        document unchanged still counts as found.
        """
        oid = parse_object_id(timetable_id)
        result = self.collection.replace_one({"_id": oid}, timetable.to_document())
        if result.matched_count == 0:
            return None

        logger.debug("Replaced timetable %s (modified=%s)", oid, result.modified_count)
        return self.get_by_id(timetable_id)

    def delete(self, timetable_id: str) -> bool:
        oid = parse_object_id(timetable_id)
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count > 0
