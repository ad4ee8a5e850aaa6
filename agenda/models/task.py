from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_serializer


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Task(BaseModel):
    """A single agenda item as stored in the agenda file and returned by the API.

    Client-supplied fields are kept as whatever JSON value was sent; only their
    presence is checked on creation. `created_at` is set once by the create
    handler and read back as stored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int
    name: JsonValue
    description: JsonValue
    scheduled_at: JsonValue = Field(alias="scheduledAt")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @model_serializer(mode="wrap")
    def _omit_missing_created_at(self, handler):
        data = handler(self)
        if self.created_at is None:
            data.pop("createdAt", None)
            data.pop("created_at", None)
        return data


class AgendaDocument(BaseModel):
    """The whole agenda file: `{"tasks": [...]}`."""

    tasks: List[Task] = Field(default_factory=list)

    def find(self, task_id: int) -> int:
        """Index of the task with `task_id`, or -1."""
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        return -1
