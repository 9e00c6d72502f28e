from abc import ABC, abstractmethod

from src.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert the task when it has no id, otherwise replace the stored one."""
        pass

    @abstractmethod
    def replace(self, task: Task) -> Task | None:
        """Overwrite an existing task; ``None`` when its id is no longer stored."""
        pass

    @abstractmethod
    def find_by_id(self, task_id: str) -> Task | None:
        pass

    @abstractmethod
    def find_all(self) -> list[Task]:
        pass

    @abstractmethod
    def delete_by_id(self, task_id: str) -> None:
        pass

    @abstractmethod
    def exists_by_id(self, task_id: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
