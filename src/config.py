from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    TODOLIST_VERSION: str = "v0.1.x"
    API_NAME: str = "Todolist"
    API_SUMMARY: str = "A task-management REST API backed by a document store"

    TODOLIST_API_KEY: str | None = None

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # Database Configuration
    REDIS_URL: str = "redis://localhost:6379"
    POSTGRES_URL: str = "postgresql://localhost:5432/todolist"  # Assumes a local Postgres db named 'todolist' exists

    TASK_STORE_BACKEND: Literal["postgres", "redis"] = "postgres"
    TASK_STORE_NAMESPACE: str = "tasks"

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "todolist"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
