from unittest.mock import Mock
import pytest
from fastapi import HTTPException, status

from src.common.api_key import get_api_key
from src.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    TaskValidationException,
    known_exception_handler,
    resource_not_found_handler,
)
from src.config import Settings


@pytest.fixture
def mock_settings() -> Mock:
    return Mock(Settings)


def test_get_api_key_disabled(mock_settings: Mock) -> None:
    mock_settings.TODOLIST_API_KEY = None
    assert get_api_key(api_key=None, settings=mock_settings) is None


def test_get_api_key_valid(mock_settings: Mock) -> None:
    mock_settings.TODOLIST_API_KEY = "valid_api_key"
    assert get_api_key(api_key="valid_api_key", settings=mock_settings) is None


def test_get_api_key_invalid(mock_settings: Mock) -> None:
    mock_settings.TODOLIST_API_KEY = "valid_api_key"
    with pytest.raises(HTTPException) as exc_info:
        get_api_key(api_key="invalid_api_key", settings=mock_settings)
    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
    assert exc_info.value.detail == "API key is invalid"


def test_get_api_key_missing(mock_settings: Mock) -> None:
    mock_settings.TODOLIST_API_KEY = "valid_api_key"
    with pytest.raises(HTTPException) as exc_info:
        get_api_key(api_key=None, settings=mock_settings)
    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
    assert exc_info.value.detail == "API key is missing"


def test_resource_not_found_message() -> None:
    exc = ResourceNotFoundException(ResourceType.TASK, "abc")

    assert str(exc) == "Task 'abc' not found"
    assert exc.resource_type == "Task"
    assert exc.identifier == "abc"

    response = resource_not_found_handler(Mock(), exc)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.body == b'{"detail":"Task \'abc\' not found"}'


def test_resource_not_found_custom_message() -> None:
    exc = ResourceNotFoundException(ResourceType.TASK, "abc", message="Gone")

    assert str(exc) == "Gone"


def test_task_validation_exception_is_bad_request() -> None:
    response = known_exception_handler(Mock(), TaskValidationException())

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.body == b'{"detail":"Task title cannot be empty"}'


def test_settings_normalization() -> None:
    settings = Settings(LOG_LEVEL="debug", CORS_ORIGINS="http://a.test, http://b.test")

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.TASK_STORE_BACKEND == "postgres"
    assert settings.TASK_STORE_NAMESPACE == "tasks"
