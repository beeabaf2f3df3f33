# tests/conftest.py

from __future__ import annotations

import os

# Store en mémoire, configuré avant le premier import de app.* (settings / engine globaux)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.db.models.users import User
from app.db.session import engine
from app.main import app


@pytest.fixture(autouse=True)
def db():
    """Schéma recréé pour chaque test : aucun état partagé entre tests."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def session(db):
    with Session(db) as s:
        yield s


@pytest.fixture()
def client(db):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def user(session: Session) -> User:
    u = User(id="u1", email="u1@example.com", name="User One")
    session.add(u)
    session.commit()
    session.refresh(u)
    return u


@pytest.fixture()
def notifications() -> list[tuple[str, str]]:
    return []
