"""
Configuration partagée pour tous les tests.
Chaque test obtient sa propre base SQLite en mémoire : aucune connexion à PostgreSQL.
"""

import pytest
from fastapi.testclient import TestClient

from lexicon.config import Settings
from lexicon.database import Database
from lexicon.main import create_app

SAMPLE_ENROLLMENT = {
    "name": "Asha",
    "grade": "10",
    "email": "asha@example.com",
    "phone": "9999999999",
    "course": "ICSE English Language",
    "timeSlot": "Morning (9:00 AM - 11:00 AM)",
}

SAMPLE_MESSAGE = {
    "name": "Ravi",
    "email": "ravi@example.com",
    "phone": "9876543210",
    "subject": "Batch timings",
    "message": "Are weekend batches available?",
}

SAMPLE_COURSE = {
    "title": "Creative Writing",
    "description": "Stories, essays and poetry.",
    "duration": "3 months",
    "batchSize": "8-10 students",
    "targetGrade": "Grades 6-10",
}


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "SCHEDULER_ENABLED": False,
        "SEED_DEFAULT_COURSES": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def db_session():
    """Session BDD seule, pour les tests de services."""
    database = Database("sqlite://")
    database.create_all()
    db = database.SessionLocal()
    yield db
    db.close()
    database.dispose()


@pytest.fixture
def client():
    """Client HTTP de test sur une application neuve (base en mémoire)."""
    app = create_app(make_settings())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client):
    """Session BDD ouverte sur la même base que le client."""
    session = client.app.state.database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def auth_client(client):
    """Client déjà connecté (compte créé via /api/auth/register)."""
    response = client.post(
        "/api/auth/register",
        json={"username": "admin", "email": "admin@lexicon.test", "password": "s3cret-pass"},
    )
    assert response.status_code == 200
    return client
