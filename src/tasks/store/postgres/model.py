from functools import lru_cache
from typing import Any
from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import declarative_base, Mapped, mapped_column


@lru_cache
def get_task_model(table_name: str) -> Any:
    """Build the mapped task class for ``table_name``.

    Each table gets its own declarative base, so stores configured with
    different namespaces can live in one process.
    """
    Base = declarative_base()

    class TaskModel(Base):
        __tablename__ = table_name

        id: Mapped[str] = mapped_column(String, primary_key=True)
        title: Mapped[str] = mapped_column(Text, nullable=False)
        description: Mapped[str] = mapped_column(Text, nullable=False, default="")
        completed: Mapped[bool] = mapped_column(
            Boolean, nullable=False, default=False
        )

        def __init__(
            self,
            id: str,
            title: str,
            description: str = "",
            completed: bool = False,
        ):
            self.id = id
            self.title = title
            self.description = description
            self.completed = completed

    return TaskModel
