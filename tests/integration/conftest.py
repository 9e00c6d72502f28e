from typing import Any, Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture
from testcontainers.redis import RedisContainer  # type: ignore
from testcontainers.postgres import PostgresContainer  # type: ignore

from src.config import Settings, get_settings
from src.main import app as main_app


@pytest.fixture(scope="session")
def redis_container() -> Generator[RedisContainer, None, None]:
    with RedisContainer(image="redis:7") as redis:
        yield redis


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    with PostgresContainer("postgres:16") as postgres:
        yield postgres


@pytest.fixture(scope="session", params=["redis", "postgres"])
def test_settings(
    request: pytest.FixtureRequest,
    redis_container: RedisContainer,
    postgres_container: PostgresContainer,
) -> Settings:
    backend: str = request.param
    common_settings: dict[str, Any] = {
        "TODOLIST_API_KEY": None,
        "OTEL_ENABLED": False,
        "REDIS_URL": f"redis://{redis_container.get_container_host_ip()}:{redis_container.get_exposed_port(6379)}",
        "POSTGRES_URL": postgres_container.get_connection_url(),
    }
    if backend == "redis":
        return Settings(TASK_STORE_BACKEND="redis", **common_settings)
    elif backend == "postgres":
        return Settings(TASK_STORE_BACKEND="postgres", **common_settings)
    else:
        raise ValueError(f"Unknown backend: {backend}")


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("src.main.settings", test_settings)


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        client.delete("/api/tasks")
        yield client
