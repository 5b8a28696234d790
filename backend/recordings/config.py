"""
Recordings API: Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the database layer and tests.
When:  Loaded once at module import time; tests build their own instances.

Database credentials come from two environment variables, DBUSER and DBPASS.
Host, port and database name are fixed defaults that point at a local MySQL
server holding the `recordings` database. DATABASE_URL replaces the assembled
URL entirely (tests use it to point at SQLite).
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database credentials ──────────────────────────────────────────────
    db_user: str = Field(
        default="",
        validation_alias=AliasChoices("DBUSER", "db_user"),
        description="Database user name (env: DBUSER)",
    )
    db_password: str = Field(
        default="",
        validation_alias=AliasChoices("DBPASS", "db_password"),
        description="Database password (env: DBPASS)",
    )

    # ── Database location ─────────────────────────────────────────────────
    # Async MySQL driver; the SQL issued by the store is dialect-neutral
    db_driver: str = Field(default="mysql+aiomysql")
    db_host: str = Field(default="127.0.0.1")
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_name: str = Field(default="recordings")

    # Full URL override, e.g. sqlite+aiosqlite:///./test.db
    database_url: Optional[str] = Field(default=None)

    # ── Connection pool ───────────────────────────────────────────────────
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # What: Upper bound in seconds for a single store operation
    # Expiry surfaces as a DatabaseError (HTTP 500)
    db_operation_timeout: float = Field(default=10.0, gt=0, le=300)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def sqlalchemy_url(self) -> URL:
        """
        What: The SQLAlchemy URL the engine connects to.
        How:  DATABASE_URL when set, otherwise assembled from the credential
              and location fields. URL.create escapes special characters
              in the password, so DBPASS can hold any value.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password masked, for log lines."""
        return self.sqlalchemy_url.render_as_string(hide_password=True)


# Singleton instance, imported by the application factory
settings = Settings()
