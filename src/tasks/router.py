from fastapi import APIRouter, Depends, status

from src.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    bad_request_response,
    resource_not_found_response,
)
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import Task, TaskRequest
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**bad_request_response},
)
def create_task(
    task_input: TaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.get("")
def list_tasks(task_service: TaskService = Depends(get_task_service)) -> list[Task]:
    return task_service.get_all_tasks()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_tasks(task_service: TaskService = Depends(get_task_service)):
    task_service.delete_all_tasks()


# Registered before "/{task_id}" so "count" is never read as an id
@router.get("/count")
def count_tasks(task_service: TaskService = Depends(get_task_service)) -> int:
    return task_service.count_tasks()


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    task = task_service.get_task_by_id(task_id)
    if task is None:
        raise ResourceNotFoundException(ResourceType.TASK, task_id)
    return task


@router.put(
    "/{task_id}",
    responses={
        **bad_request_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def update_task(
    task_id: str,
    task_input: TaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    task = task_service.update_task(task_id, task_input)
    if task is None:
        raise ResourceNotFoundException(ResourceType.TASK, task_id)
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: str, task_service: TaskService = Depends(get_task_service)):
    if not task_service.delete_task(task_id):
        raise ResourceNotFoundException(ResourceType.TASK, task_id)
