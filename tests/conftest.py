"""
pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usuarios_api.app.core.config import Settings
from usuarios_api.app.core.store import UserStore
from usuarios_api.app.main import create_app
from usuarios_api.app.services.user_service import UserService


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Static directory holding a single text asset."""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "hola.txt").write_text("hola desde public", encoding="utf-8")
    (directory / "index.html").write_text("<h1>index</h1>", encoding="utf-8")
    return directory


@pytest.fixture
def settings(static_dir: Path) -> Settings:
    """Test settings: development mode, static files from a temp dir."""
    return Settings(
        project_name="Usuarios API (test)",
        environment="development",
        log_level="DEBUG",
        log_file="",
        static_dir=str(static_dir),
        greeting="Hola mundo",
    )


@pytest.fixture
def store() -> UserStore:
    """Store holding the five initial users."""
    return UserStore.seeded()


@pytest.fixture
def service(store: UserStore) -> UserService:
    return UserService(store)


@pytest.fixture
def app(settings: Settings, store: UserStore) -> FastAPI:
    return create_app(settings, store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
