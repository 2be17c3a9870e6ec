import os

from worklog import database


def test_configure_database_keeps_engine_when_url_unchanged():
    engine_before = database.engine

    database.configure_database()

    assert database.engine is engine_before


def test_configure_database_rebuilds_engine_when_url_changes(monkeypatch):
    test_url = os.environ["DATABASE_URL"]
    engine_before = database.engine

    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/worklog_other")
    try:
        database.configure_database()

        assert database.engine is not engine_before
        assert database.engine.url.database == "worklog_other"
        assert database.SessionLocal.kw["bind"] is database.engine
    finally:
        monkeypatch.setenv("DATABASE_URL", test_url)
        database.configure_database()

    assert database.engine.url.database == engine_before.url.database
