# timetable_data/db.py
from __future__ import annotations

import logging
import threading

from fastapi import Depends
from pymongo import MongoClient
from pymongo.collection import Collection

from timetable_data.core.config import Settings, get_settings
from timetable_data.services.timetable_store import TimetableStore

logger = logging.getLogger(__name__)

# One client per process; pymongo pools connections internally.
_client: MongoClient | None = None
_client_lock = threading.Lock()


def get_client(settings: Settings) -> MongoClient:
    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                settings.validate()
                logger.info("Creating MongoDB client for database %s", settings.DATABASE_NAME)
                _client = MongoClient(
                    settings.MONGO_CONNECTION_STRING,
                    serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
                )
    return _client


def close_client() -> None:
    global _client

    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("MongoDB client closed")


def get_collection(settings: Settings = Depends(get_settings)) -> Collection:
    client = get_client(settings)
    return client[settings.DATABASE_NAME][settings.TIMETABLES_COLLECTION]


def get_store(collection: Collection = Depends(get_collection)) -> TimetableStore:
    return TimetableStore(collection)
