"""
Recordings API: Configuration Tests
====================================

What:  Environment handling in Settings.
"""

import pydantic
import pytest

from recordings.config import Settings


class TestDatabaseUrl:

    def test_credentials_come_from_dbuser_and_dbpass(self, monkeypatch):
        monkeypatch.setenv("DBUSER", "alice")
        monkeypatch.setenv("DBPASS", "s3cr:t@")
        monkeypatch.delenv("DATABASE_URL", raising=False)

        url = Settings().sqlalchemy_url

        assert url.drivername == "mysql+aiomysql"
        assert url.username == "alice"
        assert url.password == "s3cr:t@"
        assert url.host == "127.0.0.1"
        assert url.port == 3306
        assert url.database == "recordings"

    def test_database_url_overrides_parts(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./local.db")

        url = Settings().sqlalchemy_url

        assert url.get_backend_name() == "sqlite"
        assert url.database == "./local.db"

    def test_safe_url_masks_password(self, monkeypatch):
        monkeypatch.setenv("DBUSER", "alice")
        monkeypatch.setenv("DBPASS", "hunter2")
        monkeypatch.delenv("DATABASE_URL", raising=False)

        safe = Settings().safe_database_url

        assert "hunter2" not in safe
        assert "alice" in safe


class TestServerSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BACKEND_PORT", raising=False)

        settings = Settings()

        assert settings.backend_port == 8080
        assert settings.db_operation_timeout == 10.0

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="chatty")
