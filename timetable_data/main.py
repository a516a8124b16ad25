from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from timetable_data.api.routes_timetables import router as timetables_router
from timetable_data.core.config import ConfigurationError, Settings, get_settings
from timetable_data.core.errors import TimetableError
from timetable_data.core.logging_config import configure_logging
from timetable_data.db import close_client

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        current = (settings or get_settings()).validate()
        configure_logging(current)
        logger.info("Timetable data service starting (database=%s)", current.DATABASE_NAME)
        yield
        close_client()

    app = FastAPI(title="Timetable Data Service", lifespan=lifespan)
    if settings is not None:
        # requests resolve the same settings the app was built with
        app.dependency_overrides[get_settings] = lambda: settings

    @app.exception_handler(TimetableError)
    async def timetable_error_handler(request: Request, exc: TimetableError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(ConfigurationError)
    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: Exception):
        logger.error(
            "Store error handling %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return PlainTextResponse("Internal server error", status_code=500)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(timetables_router)
    return app


app = create_app()
