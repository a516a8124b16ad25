from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from timetable_data.core.errors import InvalidPayload, NotFound, TimetableError
from timetable_data.db import get_store
from timetable_data.models import Timetable
from timetable_data.services.timetable_store import TimetableStore

logger = logging.getLogger(__name__)

COLLECTION_ROUTE = "/timetables"

router = APIRouter(prefix=COLLECTION_ROUTE, tags=["timetables"])


# ========= Helpers =========

def _reject_constant(name: str):
    # NaN and Infinity are accepted by json but are not JSON
    raise InvalidPayload()


async def timetable_payload(request: Request) -> Timetable:
    """Parse the request body into a Timetable; field names are case-insensitive."""
    body = await request.body()
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        raise InvalidPayload()

    if not isinstance(data, dict):
        raise InvalidPayload()

    try:
        return Timetable.from_payload(data)
    except ValidationError:
        raise InvalidPayload()


def _location(timetable_id: str | None = None) -> dict[str, str]:
    if timetable_id is None:
        return {"Location": COLLECTION_ROUTE}
    return {"Location": f"{COLLECTION_ROUTE}/{timetable_id}"}


def _internal_error() -> PlainTextResponse:
    return PlainTextResponse("Internal server error", status_code=500)


# ========= Endpoints =========

@router.get("")
def list_timetables(store: TimetableStore = Depends(get_store)):
    try:
        timetables = store.list_all()
        return JSONResponse(
            content=[t.to_response() for t in timetables],
            headers=_location(),
        )
    except TimetableError:
        raise
    except Exception:
        logger.exception("Error fetching timetables")
        return _internal_error()


@router.get("/{timetable_id}")
def get_timetable(timetable_id: str, store: TimetableStore = Depends(get_store)):
    try:
        timetable = store.get_by_id(timetable_id)
        if timetable is None:
            raise NotFound(timetable_id)

        return JSONResponse(
            content=timetable.to_response(),
            headers=_location(timetable.id),
        )
    except TimetableError:
        raise
    except Exception:
        logger.exception("Error fetching timetable with ID %s", timetable_id)
        return _internal_error()


@router.post("")
def create_timetable(
    timetable_in: Timetable = Depends(timetable_payload),
    store: TimetableStore = Depends(get_store),
):
    try:
        created = store.create(timetable_in)
        logger.info("Created timetable %s", created.id)
        return JSONResponse(
            content=created.to_response(),
            status_code=201,
            headers=_location(created.id),
        )
    except TimetableError:
        raise
    except Exception:
        logger.exception("Error creating timetable")
        return _internal_error()


@router.put("/{timetable_id}")
def update_timetable(
    timetable_id: str,
    timetable_in: Timetable = Depends(timetable_payload),
    store: TimetableStore = Depends(get_store),
):
    try:
        updated = store.update(timetable_id, timetable_in)
        if updated is None:
            raise NotFound(timetable_id)

        logger.info("Updated timetable %s", updated.id)
        return JSONResponse(
            content=updated.to_response(),
            headers=_location(updated.id),
        )
    except TimetableError:
        raise
    except Exception:
        logger.exception("Error updating timetable with ID %s", timetable_id)
        return _internal_error()


@router.delete("/{timetable_id}")
def delete_timetable(timetable_id: str, store: TimetableStore = Depends(get_store)):
    try:
        if not store.delete(timetable_id):
            raise NotFound(timetable_id)

        logger.info("Deleted timetable %s", timetable_id)
        return Response(status_code=204, headers=_location())
    except TimetableError:
        raise
    except Exception:
        logger.exception("Error deleting timetable with ID %s", timetable_id)
        return _internal_error()
