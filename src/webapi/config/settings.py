from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, blank_to_none

# Async driver and port used when only DB_BACKEND is given.
DEFAULT_DRIVERS = {"postgresql": "asyncpg", "mysql": "aiomysql"}
DEFAULT_PORTS = {"postgresql": 5432, "mysql": 3306}


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database configuration.
    # DATABASE_URI, when set, is used verbatim; otherwise the URL is assembled
    # from DB_BACKEND and the DB_* parts (POSTGRES_* names are still accepted).
    DATABASE_URI: str | None = None
    DB_BACKEND: Literal["postgresql", "mysql"] = "postgresql"
    DB_DRIVER: str | None = Field(default=None, validation_alias=AliasChoices("DB_DRIVER", "POSTGRES_DRIVER"))
    DB_USERNAME: str = Field(default="postgres", validation_alias=AliasChoices("DB_USERNAME", "POSTGRES_USERNAME"))
    DB_PASSWORD: str = Field(default="", validation_alias=AliasChoices("DB_PASSWORD", "POSTGRES_PASSWORD"))
    DB_HOST: str = Field(default="localhost", validation_alias=AliasChoices("DB_HOST", "POSTGRES_HOST"))
    DB_PORT: int | None = Field(default=None, validation_alias=AliasChoices("DB_PORT", "POSTGRES_PORT"))
    DB_NAME: str = Field(default="webapi", validation_alias=AliasChoices("DB_NAME", "POSTGRES_DB"))

    # Schema holding car/usr/subscription/error. None for schema-less backends.
    DB_SCHEMA: str | None = "webapi"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # HTTP listener
    SERVER_HOST: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("SERVER_HOST", "MY_BIN_HOST"),
    )
    SERVER_PORT: int = Field(
        default=3456,
        validation_alias=AliasChoices("SERVER_PORT", "PORT"),
    )

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/webapi")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # --- Derived settings ---
    @property
    def DATABASE_URL(self) -> str:
        """
        Return the SQLAlchemy URL the Connection Provider connects with.

        `DATABASE_URI` wins when it is set (CI, tests, managed databases hand out
        a single connection string). Otherwise the URL is built from the DB_*
        parts with the backend's async driver and port unless overridden.
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        driver = self.DB_DRIVER or DEFAULT_DRIVERS[self.DB_BACKEND]
        port = self.DB_PORT or DEFAULT_PORTS[self.DB_BACKEND]
        return (
            f"{self.DB_BACKEND}+{driver}://"
            f"{self.DB_USERNAME}:{self.DB_PASSWORD}@"
            f"{self.DB_HOST}:{port}/"
            f"{self.DB_NAME}"
        )

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before Literal validation runs, so
        `LOG_LEVEL=debug` in the environment is accepted.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    @field_validator("DB_BACKEND", mode="before")
    def normalize_db_backend(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    @field_validator("DB_SCHEMA", "DATABASE_URI", "DB_DRIVER", mode="before")
    def empty_means_unset(cls, v: str | None) -> str | None:
        # DB_SCHEMA= in .env disables the schema instead of naming an empty one
        return blank_to_none(v)

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


# Settings come from the environment once per process.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
