from src.config import Settings
from src.common.redis import RedisClient
from src.tasks.store.base import TaskStore
from src.tasks.store.postgres.store import PostgresTaskStore
from src.tasks.store.redis.store import RedisTaskStore


def get_task_store_backend(
    redis_client: RedisClient | None,
    settings: Settings,
) -> TaskStore:
    if settings.TASK_STORE_BACKEND == "postgres":
        return PostgresTaskStore(
            database_url=settings.POSTGRES_URL,
            table_name=settings.TASK_STORE_NAMESPACE,
        )
    elif settings.TASK_STORE_BACKEND == "redis":
        if redis_client is None:
            raise ValueError("A Redis client is required for the redis task store")
        return RedisTaskStore(
            redis_client=redis_client,
            key_prefix=settings.TASK_STORE_NAMESPACE,
        )
    else:
        raise ValueError(
            f"Unsupported task store backend: {settings.TASK_STORE_BACKEND}"
        )
