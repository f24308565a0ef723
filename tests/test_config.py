"""Tests for environment-driven configuration."""

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars


class TestAppSettings:
    def test_defaults(self, monkeypatch):
        for var in ("MONGO_SERVICE_URL", "PG_SERVICE_URL", "PORT"):
            monkeypatch.delenv(var, raising=False)

        settings = AppSettings(_env_file=None)

        assert settings.mongo_service_url == "http://localhost:4001"
        assert settings.pg_service_url == "http://localhost:4002"
        assert settings.port == 5000
        assert settings.api_prefix == "/balanceador"

    def test_historical_env_names(self, monkeypatch):
        monkeypatch.setenv("MONGO_SERVICE_URL", "http://mongo:4001/")
        monkeypatch.setenv("PG_SERVICE_URL", "http://pg:4002")
        monkeypatch.setenv("PORT", "8080")

        settings = AppSettings(_env_file=None)

        assert settings.service_urls() == {"mongo": "http://mongo:4001", "postgres": "http://pg:4002"}
        assert settings.port == 8080

    def test_service_order_is_stable(self):
        settings = AppSettings(_env_file=None)
        assert list(settings.service_urls()) == ["mongo", "postgres"]

    def test_prefix_is_normalized(self):
        assert AppSettings(_env_file=None, api_prefix="balanceador/").api_prefix == "/balanceador"

    def test_cors_origins_list(self):
        settings = AppSettings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_invalid_timeout_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)

    def test_identity_defaults_to_id_then_name(self, monkeypatch):
        monkeypatch.delenv("IDENTITY_FIELDS", raising=False)
        assert AppSettings(_env_file=None).identity_fields == ("id", "name")

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        assert AppSettings(_env_file=None).log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["VERBOSE", "", "info2"])
    def test_invalid_log_level_rejected(self, monkeypatch, level):
        monkeypatch.setenv("LOG_LEVEL", level)
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_identity_fields_from_env(self, monkeypatch):
        monkeypatch.setenv("IDENTITY_FIELDS", '["_id", "id"]')
        assert AppSettings(_env_file=None).identity_fields == ("_id", "id")


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="uses XDG_CONFIG_HOME")
class TestUserEnvFile:
    def test_write_and_update(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        path = write_user_env_vars({"MONGO_SERVICE_URL": "http://m:1", "PORT": None})
        write_user_env_vars({"PG_SERVICE_URL": "http://p:2"})

        assert path == tmp_path / "balanceador-cazadores" / ".env"
        content = path.read_text(encoding="utf-8")
        assert "MONGO_SERVICE_URL=http://m:1" in content
        assert "PG_SERVICE_URL=http://p:2" in content
        assert "PORT" not in content
