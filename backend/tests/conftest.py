import pytest
from fastapi.testclient import TestClient

from app.db import Database
from app.main import create_app


@pytest.fixture()
def database(tmp_path):
    # Fresh SQLite file per test so tests never share rows
    db = Database(f"sqlite:///{tmp_path / 'weights_test.db'}")
    db.init_schema()
    yield db
    db.close()


@pytest.fixture()
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(database):
    app = create_app(database=database)
    # Entering the context runs the lifespan (schema init on startup)
    with TestClient(app) as c:
        yield c
