import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ..errors import NotFoundError, StorageError, ValidationError
from ..models import Task, utc_timestamp
from ..schemas.task import ErrorResponse, MessageResponse, TaskCreate
from ..store import JsonStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_task_id(raw: str) -> Optional[int]:
    """Integer from the leading digits of a path segment, None if there are none."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


@router.get(
    "/tasks",
    response_model=List[Task],
    responses={500: {"model": ErrorResponse}},
)
def list_tasks(store: JsonStore = Depends(get_store)):
    """Return every stored task in insertion order."""
    return store.load().tasks


@router.post(
    "/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_task(task: TaskCreate, store: JsonStore = Depends(get_store)):
    """Append a new task with a server-assigned id and creation time."""
    if not task.is_complete():
        raise ValidationError()

    doc = store.load()
    new_task = Task(
        id=store.next_id(doc),
        name=task.name,
        description=task.description,
        scheduled_at=task.scheduled_at,
        created_at=utc_timestamp(),
    )
    doc.tasks.append(new_task)

    if not store.save(doc):
        raise StorageError("failed to save task")

    logger.info("Created task id=%s scheduledAt=%s", new_task.id, new_task.scheduled_at)
    return new_task


@router.delete(
    "/tasks/{task_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_task(task_id: str, store: JsonStore = Depends(get_store)):
    """Remove the task with the given id."""
    parsed_id = _parse_task_id(task_id)
    doc = store.load()

    index = doc.find(parsed_id) if parsed_id is not None else -1
    if index == -1:
        raise NotFoundError()

    del doc.tasks[index]

    if not store.save(doc):
        raise StorageError("failed to remove task")

    logger.info("Removed task id=%s", parsed_id)
    return MessageResponse(message="task removed")
