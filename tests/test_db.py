import pytest
from fastapi.testclient import TestClient

from training_events_api.app.core.config import Settings
from training_events_api.app.core.db import Database, resolve_database_path
from training_events_api.app.main import create_app


def test_durable_store_survives_reopen(tmp_path):
    path = str(tmp_path / "events.db")
    settings = Settings(storage_mode="durable", database_url=path, log_level="WARNING")

    with TestClient(create_app(settings)) as client:
        client.post(
            "/api/events",
            json={"name": "Persisted", "dateRange": "02/02", "hoursLoad": 4, "dayCount": 1},
        )

    with TestClient(create_app(settings)) as client:
        names = [e["name"] for e in client.get("/api/events").json()]
    assert names == ["Persisted"]


def test_volatile_store_is_seeded_with_sample_event():
    settings = Settings(storage_mode="volatile", seed_sample_data=True, log_level="WARNING")
    with TestClient(create_app(settings)) as client:
        events = client.get("/api/events").json()
    assert len(events) == 1
    assert events[0]["name"] == "Evento de Exemplo"
    assert events[0]["dayCount"] == 3


def test_volatile_store_loses_data_on_restart():
    settings = Settings(storage_mode="volatile", seed_sample_data=False, log_level="WARNING")
    with TestClient(create_app(settings)) as client:
        client.post(
            "/api/events",
            json={"name": "Gone", "dateRange": "03/03", "hoursLoad": 2, "dayCount": 1},
        )
    with TestClient(create_app(settings)) as client:
        assert client.get("/api/events").json() == []


def test_seed_only_applies_to_volatile_mode(tmp_path):
    db = Database(storage_mode="durable", path=str(tmp_path / "x.db"), seed_sample_data=True)
    assert db.seed_sample_data is False


def test_unknown_storage_mode():
    with pytest.raises(ValueError):
        Database(storage_mode="cloud")


def test_open_and_close_are_idempotent():
    db = Database(storage_mode="volatile")
    db.open()
    db.open()
    db.ping()
    db.close()
    db.close()
    assert not db.is_open
    with pytest.raises(RuntimeError):
        db.ping()


def test_cursor_rolls_back_on_error():
    with Database(storage_mode="volatile") as db:
        with pytest.raises(ZeroDivisionError):
            with db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO events (name, date_range, hours_load, day_count) VALUES ('x', 'y', 1, 1)"
                )
                1 / 0
        with db.cursor() as cursor:
            assert cursor.execute("SELECT COUNT(*) FROM events").fetchone()[0] == 0


def test_relative_paths_resolve_against_project_root():
    resolved = resolve_database_path("training_events.db")
    assert resolved.endswith("training_events.db")
    assert resolve_database_path(":memory:") == ":memory:"
