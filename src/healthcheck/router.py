from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import create_engine, text

from src.config import Settings, get_settings
from src.common.redis import RedisClient, get_redis_client

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "postgres": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "postgres": {
                            "status": "error",
                            "message": "Connection error or unexpected result",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    settings: Settings = Depends(get_settings),
    redis_client: RedisClient | None = Depends(get_redis_client),
) -> JSONResponse:
    health_status: dict[str, Any] = {"api": {"status": "ok"}}
    has_error = False

    if settings.TASK_STORE_BACKEND == "redis":
        health_status["redis"] = {"status": "ok"}
        try:
            if redis_client is None:
                raise Exception("Redis client is not initialised")
            redis_client.ping()
        except Exception as e:
            health_status["redis"].update({"status": "error", "message": str(e)})
            has_error = True
    else:
        health_status["postgres"] = {"status": "ok"}
        engine = None
        try:
            engine = create_engine(settings.POSTGRES_URL)
            with engine.connect() as connection:
                result = connection.execute(text("SELECT 1")).scalar()
                if result != 1:
                    raise Exception("Postgres health check failed")
        except Exception as e:
            health_status["postgres"].update({"status": "error", "message": str(e)})
            has_error = True
        finally:
            if engine is not None:
                engine.dispose()

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
