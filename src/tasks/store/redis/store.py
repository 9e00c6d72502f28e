from typing import TypedDict
from uuid import uuid4
from redis.exceptions import WatchError

from src.common.redis import RedisClient
from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore


class TaskMapping(TypedDict):
    id: str
    title: str
    description: str
    completed: int


class RedisTaskStore(TaskStore):
    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix

    def _get_task_key(self, task_id: str) -> str:
        return f"{self.key_prefix}:{task_id}"

    def _map_task(self, task: dict[str, str]) -> Task:
        return Task(
            id=task["id"],
            title=task["title"],
            description=task.get("description", ""),
            completed=task.get("completed") == "1",
        )

    def _scan_task_keys(self) -> list[str]:
        return [key for key in self.client.scan_iter(f"{self.key_prefix}:*")]

    def _to_mapping(self, task_id: str, task: Task) -> TaskMapping:
        return {
            "id": task_id,
            "title": task.title,
            "description": task.description,
            "completed": int(task.completed),
        }

    def save(self, task: Task) -> Task:
        task_id = task.id or str(uuid4())
        self.client.hset(
            self._get_task_key(task_id),
            mapping=self._to_mapping(task_id, task),  # type: ignore
        )
        return task.model_copy(update={"id": task_id})

    def replace(self, task: Task) -> Task | None:
        if not task.id:
            return None

        key = self._get_task_key(task.id)
        with self.client.pipeline() as pipe:
            while True:
                try:
                    pipe.watch(key)
                    if not pipe.exists(key):
                        pipe.unwatch()
                        return None
                    pipe.multi()
                    pipe.hset(key, mapping=self._to_mapping(task.id, task))  # type: ignore
                    pipe.execute()
                    return task
                except WatchError:
                    # Key changed between WATCH and EXEC, check again
                    continue

    def find_by_id(self, task_id: str) -> Task | None:
        task = self.client.hgetall(self._get_task_key(task_id))
        if not task:
            return None
        return self._map_task(task)

    def find_all(self) -> list[Task]:
        tasks: list[Task] = []
        for key in self._scan_task_keys():
            task = self.client.hgetall(key)
            # Deleted between the scan and the read
            if task:
                tasks.append(self._map_task(task))
        return tasks

    def delete_by_id(self, task_id: str) -> None:
        self.client.delete(self._get_task_key(task_id))

    def exists_by_id(self, task_id: str) -> bool:
        return bool(self.client.exists(self._get_task_key(task_id)))

    def delete_all(self) -> None:
        keys = self._scan_task_keys()
        if keys:
            self.client.delete(*keys)

    def count(self) -> int:
        return len(self._scan_task_keys())
