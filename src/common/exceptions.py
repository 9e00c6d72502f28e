from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from redis.exceptions import ConnectionError, TimeoutError
from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class KnownException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class TaskValidationException(KnownException):
    def __init__(self, message: str = "Task title cannot be empty"):
        super().__init__(message)


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


def known_exception_handler(request: Request, exc: KnownException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def redis_connection_exception_handler(
    request: Request, exc: ConnectionError | TimeoutError
):
    logger.error(f"Failed to connect to Redis: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


def database_connection_exception_handler(request: Request, exc: OperationalError):
    logger.error(f"Failed to connect to the database: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
        """Convert a tuple of location parts to a dot-separated string"""
        path = ""
        for i, x in enumerate(loc):
            if isinstance(x, str):
                if i > 0:
                    path += "."
                path += x
            elif isinstance(x, int):
                path += f"[{x}]"
            else:
                raise TypeError("Unexpected type")
        return path

    def process_error(error: dict[str, Any]) -> dict[str, Any]:
        processed = {
            "type": error["type"],
            "loc": loc_to_dot_sep(tuple(error["loc"])),
            "msg": error["msg"],
        }
        if "input" in error:
            processed["input"] = error["input"]
        return processed

    errors = [process_error(error) for error in exc.errors()]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "Validation error", "errors": errors},
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {
                "application/json": {
                    "example": {"detail": f"{resource_type.value} 'example' not found"}
                }
            },
        }
    }


bad_request_response: ResponseDict = {
    400: {
        "description": "Invalid task",
        "content": {
            "application/json": {"example": {"detail": "Task title cannot be empty"}}
        },
    }
}

service_unavailable_response: ResponseDict = {
    503: {
        "description": "Service unavailable",
        "content": {"application/json": {"example": {"detail": "Service unavailable"}}},
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {"example": {"detail": "An unexpected error occurred"}}
        },
    }
}

validation_error_response: ResponseDict = {
    422: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Validation error",
                    "errors": [
                        {
                            "type": "type",
                            "loc": "field.sub_field",
                            "msg": "error message",
                            "input": "input value",
                        }
                    ],
                }
            }
        },
    }
}
