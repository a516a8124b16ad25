import mongomock
import pytest
from fastapi.testclient import TestClient

from timetable_data.core.config import Settings
from timetable_data.db import get_collection
from timetable_data.main import create_app


@pytest.fixture()
def settings():
    return Settings(
        mongo_connection_string="mongodb://localhost:27017",
        database_name="timetables-test",
    )


@pytest.fixture()
def collection():
    # in-memory stand-in for the Timetables collection
    return mongomock.MongoClient()["timetables-test"]["Timetables"]


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app, collection):
    app.dependency_overrides[get_collection] = lambda: collection

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
