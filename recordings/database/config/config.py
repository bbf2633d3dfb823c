"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed database configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- `DBUSER` and `DBPASS` are required; everything else falls back to the
  fixed local defaults (localhost:5432, database `recordings`, TLS disabled).
- Missing required fields raise a validation error when `get_settings()` is
  first called, not at import time.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from recordings.database.config.config import get_settings

settings = get_settings()
url = settings.connection_url
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Database connection settings loaded from environment variables
    or a `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DBUSER: str = Field(..., description="Database username credential.")
    DBPASS: str = Field(..., description="Database password credential.")
    DBHOST: str = Field("localhost", description="Hostname or IP address of the database server.")
    DBPORT: int = Field(5432, description="TCP port of the database server.")
    DBNAME: str = Field("recordings", description="Name of the database holding the `album` table.")
    DBSSLMODE: str = Field("disable", description="libpq `sslmode` (e.g., `disable`, `require`).")
    DBDRIVER: str = Field("postgresql+psycopg2", description="SQLAlchemy driver name.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level for the demo entry point (case-insensitive)."
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def connection_url(self) -> URL:
        """SQLAlchemy URL built from the settings; credentials are never string-formatted by hand."""
        return URL.create(
            drivername=self.DBDRIVER,
            username=self.DBUSER,
            password=self.DBPASS,
            host=self.DBHOST,
            port=self.DBPORT,
            database=self.DBNAME,
            query={"sslmode": self.DBSSLMODE},
        )

    @property
    def connection_string(self) -> str:
        """libpq keyword/value connection string, e.g. for `psql` or logging (password included)."""
        return (
            f"host={self.DBHOST} port={self.DBPORT} user={self.DBUSER} "
            f"password={self.DBPASS} dbname={self.DBNAME} sslmode={self.DBSSLMODE}"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide `Settings`, loading them on first use."""
    return Settings()
