import mongomock
import pytest
from fastapi.testclient import TestClient

from timetable_data import db
from timetable_data.core.config import Settings, get_settings
from timetable_data.main import create_app


@pytest.fixture()
def no_env(monkeypatch):
    monkeypatch.delenv("MONGO_CONNECTION_STRING", raising=False)
    monkeypatch.delenv("DATABASE_NAME", raising=False)
    get_settings.cache_clear()
    db.close_client()
    yield
    db.close_client()
    get_settings.cache_clear()


def test_explicit_settings_reach_the_store(monkeypatch, no_env):
    created_clients = []

    def fake_client(host, **kwargs):
        client = mongomock.MongoClient()
        created_clients.append((host, kwargs, client))
        return client

    monkeypatch.setattr(db, "MongoClient", fake_client)
    settings = Settings(
        mongo_connection_string="mongodb://localhost:1",
        database_name="club",
        collection_name="Plans",
        server_selection_timeout_ms=500,
    )

    with TestClient(create_app(settings)) as client:
        response = client.post("/timetables", json={"name": "Spring"})
        listed = client.get("/timetables")

        assert response.status_code == 201
        assert listed.status_code == 200
        assert len(created_clients) == 1
        host, kwargs, mongo = created_clients[0]
        assert host == "mongodb://localhost:1"
        assert kwargs == {"serverSelectionTimeoutMS": 500}
        assert mongo["club"]["Plans"].count_documents({}) == 1
