import pytest
from fastapi.testclient import TestClient

from customer_api.config import Settings
from customer_api.main import create_app
from customer_api.store import CustomerStore


@pytest.fixture()
def store() -> CustomerStore:
    return CustomerStore.seeded()


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, APP_NAME="Customer API", CORS_ORIGINS=["*"], SEED_DATA=True)


@pytest.fixture()
def client(settings, store):
    with TestClient(create_app(settings, store=store)) as test_client:
        yield test_client
