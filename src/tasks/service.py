import logging

from src.common.exceptions import TaskValidationException
from src.tasks.schemas import Task, TaskRequest
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Business rules for tasks on top of a TaskStore.

    New tasks always start out not completed; updates may set ``completed``
    freely. Missing ids are reported as ``None``/``False`` rather than raised.
    """

    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def _validate_title(self, title: str) -> None:
        if not title or not title.strip():
            logger.error("Task title cannot be empty")
            raise TaskValidationException("Task title cannot be empty")

    def create_task(self, task_input: TaskRequest) -> Task:
        logger.info(f"Creating new task with title: {task_input.title}")

        self._validate_title(task_input.title)

        if task_input.completed:
            logger.warning("New task cannot be completed, resetting to false")

        saved_task = self.task_store.save(
            Task(
                title=task_input.title,
                description=task_input.description,
                completed=False,
            )
        )

        logger.info(f"Task created successfully with ID: {saved_task.id}")
        return saved_task

    def get_task_by_id(self, task_id: str) -> Task | None:
        logger.info(f"Fetching task with ID: {task_id}")
        return self.task_store.find_by_id(task_id)

    def get_all_tasks(self) -> list[Task]:
        logger.info("Fetching all tasks")
        return self.task_store.find_all()

    def update_task(self, task_id: str, task_input: TaskRequest) -> Task | None:
        logger.info(f"Updating task with ID: {task_id}")

        existing_task = self.task_store.find_by_id(task_id)
        if existing_task is None:
            logger.warning(f"Task not found with ID: {task_id}")
            return None

        self._validate_title(task_input.title)

        # Never re-creates a task deleted since the lookup
        updated_task = self.task_store.replace(
            existing_task.model_copy(
                update={
                    "title": task_input.title,
                    "description": task_input.description,
                    "completed": task_input.completed,
                }
            )
        )
        if updated_task is None:
            logger.warning(f"Task deleted during update: {task_id}")
            return None

        logger.info(f"Task updated successfully: {task_id}")
        return updated_task

    def delete_task(self, task_id: str) -> bool:
        logger.info(f"Deleting task with ID: {task_id}")

        if self.task_store.exists_by_id(task_id):
            self.task_store.delete_by_id(task_id)
            logger.info(f"Task deleted successfully: {task_id}")
            return True

        logger.warning(f"Task not found with ID: {task_id}")
        return False

    def delete_all_tasks(self) -> None:
        logger.info("Deleting all tasks")
        self.task_store.delete_all()
        logger.info("All tasks deleted successfully")

    def count_tasks(self) -> int:
        count = self.task_store.count()
        logger.info(f"Total tasks count: {count}")
        return count
