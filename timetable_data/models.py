# timetable_data/models.py
from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

# Keys that identify a document; never taken from a client payload.
IDENTITY_KEYS = {"id", "_id"}

# BSON stores integers as at most 8 bytes
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _check_storable_value(value: Any) -> None:
    if isinstance(value, bool):
        return
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("integer does not fit in 8 bytes")
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("non-finite number")
    elif isinstance(value, dict):
        for item in value.values():
            _check_storable_value(item)
    elif isinstance(value, list):
        for item in value:
            _check_storable_value(item)


class Timetable(BaseModel):
    """
    A timetable document.

    Only `id` and `name` are declared; every other field is carried through
    as-is. `id` is the hex form of the store's ObjectId.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        # map "Name", "NAME", ... onto declared fields; exact keys win
        if not isinstance(data, dict):
            return data

        declared = {name.lower(): name for name in cls.model_fields}
        result: dict[str, Any] = {}
        for key, value in data.items():
            canonical = declared.get(key.lower(), key) if isinstance(key, str) else key
            if canonical in result and key != canonical:
                continue
            result[canonical] = value
        return result

    @model_validator(mode="after")
    def _check_storable(self) -> "Timetable":
        # the whole body becomes the replacement document, so no update operators
        for key, value in (self.model_extra or {}).items():
            if key.startswith("$"):
                raise ValueError(f"field name {key!r} may not start with '$'")
            _check_storable_value(value)
        return self

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Timetable":
        """Build an entity from a request body, ignoring any client-sent identity."""
        return cls.model_validate(
            {
                key: value
                for key, value in data.items()
                if not (isinstance(key, str) and key.lower() in IDENTITY_KEYS)
            }
        )

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Timetable":
        # stored documents are trusted as-is, whatever their field types
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return cls.model_construct(**data)

    def to_document(self) -> dict[str, Any]:
        """Fields to store, without identity and without unset declared fields."""
        declared = type(self).model_fields
        data = self.model_dump(warnings=False)
        return {
            key: value
            for key, value in data.items()
            if key not in IDENTITY_KEYS
            and (key not in declared or key in self.model_fields_set)
        }

    def to_response(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}
