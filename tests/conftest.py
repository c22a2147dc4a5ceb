import pytest
from fastapi.testclient import TestClient

from user_registry.application.http.fastapi.api import create_app
from user_registry.config import Settings


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def settings(database_url) -> Settings:
    return Settings(database_url=database_url)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def unreachable_client(tmp_path):
    # parent directory does not exist, so sqlite cannot open the file
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'missing' / 'users.db'}",
        create_schema=False,
    )
    with TestClient(create_app(settings)) as client:
        yield client
