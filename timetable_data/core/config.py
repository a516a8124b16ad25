from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing."""


class Settings:
    REQUIRED = ("MONGO_CONNECTION_STRING", "DATABASE_NAME")

    def __init__(
        self,
        mongo_connection_string: str | None,
        database_name: str | None,
        collection_name: str = "Timetables",
        server_selection_timeout_ms: int = 30000,
        log_level: str = "INFO",
    ):
        # Connection string for the MongoDB deployment (Atlas, Cosmos DB, local)
        self.MONGO_CONNECTION_STRING = mongo_connection_string
        self.DATABASE_NAME = database_name
        self.TIMETABLES_COLLECTION = collection_name
        self.MONGO_SERVER_SELECTION_TIMEOUT_MS = server_selection_timeout_ms
        self.LOG_LEVEL = log_level

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            mongo_connection_string=os.getenv("MONGO_CONNECTION_STRING"),
            database_name=os.getenv("DATABASE_NAME"),
            collection_name=os.getenv("TIMETABLES_COLLECTION", "Timetables"),
            server_selection_timeout_ms=int(
                os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "30000")
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> "Settings":
        """
        Fail fast when a required setting is absent or blank.

        Returns the settings so the call can be chained.
        """
        missing = [
            name for name in self.REQUIRED
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ConfigurationError(
                "Missing required configuration: " + ", ".join(missing)
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
