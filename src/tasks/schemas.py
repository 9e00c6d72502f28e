from typing import Any
from pydantic import BaseModel, field_validator


class Task(BaseModel):
    id: str | None = None
    title: str
    description: str = ""
    completed: bool = False


class TaskRequest(BaseModel):
    # Title is checked by the service so a blank one surfaces as a 400
    title: str = ""
    description: str = ""
    completed: bool = False

    @field_validator("title", "description", mode="before")
    def null_to_empty(cls, v: Any):
        if v is None:
            return ""
        return v
