"""
Test configuration and fixtures.

The API runs in-process through httpx's ASGI transport, with the database
dependency pointed at a mongomock-motor database carrying the real indexes.
"""
import os
import uuid
from typing import AsyncGenerator

import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

os.environ["ENVIRONMENT"] = "test"

import config
import database
from main import app
from database import get_db, init_db
from services.record_gateway import RecordGateway
from services.record_service import RecordService

fake = Faker()


@pytest.fixture
async def db():
    client = AsyncMongoMockClient()
    test_db = client[f"test_{uuid.uuid4().hex}"]
    await init_db(test_db)
    return test_db


@pytest.fixture
def collection(db):
    return db[config.COLLECTION_NAME]


@pytest.fixture
def gateway(collection) -> RecordGateway:
    return RecordGateway(collection)


@pytest.fixture
def service(gateway) -> RecordService:
    return RecordService(gateway)


@pytest.fixture
async def client(db, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    monkeypatch.setattr(database, "db", db)
    app.dependency_overrides[get_db] = lambda: db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def student_data() -> dict:
    return {
        "name": fake.name(),
        "email": fake.unique.email(),
        "phone": "555-123-4567",
        "course": "Computer Science",
        "feeStatus": "Pending",
        "joinDate": "2024-01-10",
        "notes": "Prefers evening classes",
    }


@pytest.fixture
def make_student():
    def _make(**overrides) -> dict:
        data = {
            "name": fake.name(),
            "email": fake.unique.email(),
            "course": "Mathematics",
            "feeStatus": "Paid",
            "joinDate": fake.date_between(start_date="-2y", end_date="today").isoformat(),
        }
        data.update(overrides)
        return data
    return _make
