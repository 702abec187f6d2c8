# tests/conftest.py

import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from organizador_api.core.database import Base, get_db
from organizador_api.main import app
from organizador_api.models import tarefa as _tarefa_model  # noqa: F401


@pytest.fixture()
def engine():
    """Private in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory) -> TestClient:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def nova_tarefa():
    """Builds a valid task payload; keyword arguments override fields."""
    def build(**overrides):
        payload = {
            "titulo": "Estudar FastAPI",
            "descricao": "Ler a documentação de dependências",
            "data": "2024-03-05T10:00:00",
            "status": 0,
        }
        payload.update(overrides)
        return payload

    return build
