"""
Tests for application assembly: root route, static files, error
rendering, access logging and settings.
"""

import logging

from fastapi.testclient import TestClient

from usuarios_api.app.core.config import Settings
from usuarios_api.app.core.logging_config import LOG_FORMAT, setup_logging
from usuarios_api.app.core.store import UserStore
from usuarios_api.app.main import create_app


class TestRoot:
    def test_greeting(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Hola mundo"


class TestStaticFiles:
    def test_serves_asset(self, client):
        response = client.get("/hola.txt")

        assert response.status_code == 200
        assert response.text == "hola desde public"

    def test_unknown_path_is_plain_404(self, client):
        response = client.get("/no-existe.txt")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")

    def test_missing_directory(self, tmp_path, caplog):
        """A missing static directory only disables static files."""
        settings = Settings(environment="test", static_dir=str(tmp_path / "missing"))

        with caplog.at_level(logging.WARNING):
            app = create_app(settings)

        assert "static files disabled" in caplog.text
        with TestClient(app) as client:
            assert client.get("/api/usuarios").status_code == 200
            assert client.get("/hola.txt").status_code == 404


class TestAppState:
    def test_default_store_is_seeded(self, settings):
        app = create_app(settings)
        assert len(app.state.store) == 5

    def test_apps_do_not_share_store(self, settings):
        first = create_app(settings)
        second = create_app(settings)

        with TestClient(first) as client:
            client.post("/api/usuarios", json={"nombre": "Ana"})

        assert len(first.state.store) == 6
        assert len(second.state.store) == 5

    def test_custom_store(self, settings):
        app = create_app(settings, UserStore())

        with TestClient(app) as client:
            assert client.get("/api/usuarios").json() == []
            assert client.post("/api/usuarios", json={"nombre": "Ana"}).json() == {"id": 1, "nombre": "Ana"}


class TestAccessLog:
    def test_logs_requests_in_development(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="usuarios_api.access"):
            client.get("/api/usuarios/3")

        records = [r for r in caplog.records if r.name == "usuarios_api.access"]
        assert len(records) == 1
        assert records[0].getMessage().startswith("GET /api/usuarios/3 200 ")

    def test_logs_query_string(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="usuarios_api.access"):
            client.get("/api/usuarios?orden=nombre&x=1")

        records = [r for r in caplog.records if r.name == "usuarios_api.access"]
        assert records[0].getMessage().startswith("GET /api/usuarios?orden=nombre&x=1 200 ")

    def test_silent_outside_development(self, settings, caplog):
        settings.environment = "production"
        app = create_app(settings)

        with caplog.at_level(logging.INFO, logger="usuarios_api.access"):
            with TestClient(app) as client:
                client.get("/api/usuarios")

        assert not [r for r in caplog.records if r.name == "usuarios_api.access"]


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "APP_ENV", "STATIC_DIR", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.static_dir == "public"
        assert settings.is_development

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings()

        assert settings.port == 8080
        assert not settings.is_development


class TestSetupLogging:
    """Tests for setup_logging against a bare root logger."""

    def test_installs_console_and_file_handlers(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        logfile = tmp_path / "usuarios.log"

        try:
            assert setup_logging("debug", str(logfile)) is True

            assert root.level == logging.DEBUG
            assert [type(h) for h in root.handlers] == [logging.StreamHandler, logging.FileHandler]
            assert all(h.formatter._fmt == LOG_FORMAT for h in root.handlers)

            logging.getLogger("usuarios_api.test").info("hola")
            root.handlers[1].flush()
            assert "[INFO] usuarios_api.test: hola" in logfile.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        assert setup_logging("chatty") is True
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_keeps_existing_configuration(self, monkeypatch):
        root = logging.getLogger()
        existing = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [existing])

        assert setup_logging("DEBUG", "ignored.log") is False
        assert root.handlers == [existing]


class TestRunner:
    def test_serves_module_level_app(self):
        """run.py reuses the app built on import instead of building another."""
        import run
        from usuarios_api.app import main

        assert run.app is main.app
