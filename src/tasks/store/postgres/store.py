from typing import Any
from uuid import uuid4
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.tasks.schemas import Task
from src.tasks.store.base import TaskStore
from src.tasks.store.postgres.model import get_task_model


class PostgresTaskStore(TaskStore):
    def __init__(self, database_url: str, table_name: str = "tasks"):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        self.TaskModel = get_task_model(table_name)
        self.TaskModel.metadata.create_all(self.engine)

    def _map_task(self, task: Any) -> Task:
        return Task(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
        )

    def save(self, task: Task) -> Task:
        with self.Session() as session:
            existing = (
                session.query(self.TaskModel).filter_by(id=task.id).first()
                if task.id
                else None
            )

            if existing:
                existing.title = task.title
                existing.description = task.description
                existing.completed = task.completed
                stored = existing
            else:
                stored = self.TaskModel(
                    id=task.id or str(uuid4()),
                    title=task.title,
                    description=task.description,
                    completed=task.completed,
                )
                session.add(stored)

            session.commit()
            return self._map_task(stored)

    def replace(self, task: Task) -> Task | None:
        if not task.id:
            return None

        with self.Session() as session:
            # Single UPDATE statement; a concurrently deleted row matches nothing
            updated = (
                session.query(self.TaskModel)
                .filter_by(id=task.id)
                .update(
                    {
                        "title": task.title,
                        "description": task.description,
                        "completed": task.completed,
                    }
                )
            )
            session.commit()

        return task if updated else None

    def find_by_id(self, task_id: str) -> Task | None:
        with self.Session() as session:
            task = session.query(self.TaskModel).filter_by(id=task_id).first()
            if not task:
                return None
            return self._map_task(task)

    def find_all(self) -> list[Task]:
        with self.Session() as session:
            return [
                self._map_task(task) for task in session.query(self.TaskModel).all()
            ]

    def delete_by_id(self, task_id: str) -> None:
        with self.Session() as session:
            session.query(self.TaskModel).filter_by(id=task_id).delete()
            session.commit()

    def exists_by_id(self, task_id: str) -> bool:
        with self.Session() as session:
            return session.query(
                session.query(self.TaskModel).filter_by(id=task_id).exists()
            ).scalar()

    def delete_all(self) -> None:
        with self.Session() as session:
            session.query(self.TaskModel).delete()
            session.commit()

    def count(self) -> int:
        with self.Session() as session:
            return session.query(self.TaskModel).count()
