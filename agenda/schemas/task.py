from pydantic import BaseModel, ConfigDict, Field, JsonValue


class TaskCreate(BaseModel):
    """Body of POST /api/tasks.

    Fields default to None so that a missing field reaches the handler and
    gets the same 400 as an empty one. Any other JSON value is accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: JsonValue = None
    description: JsonValue = None
    scheduled_at: JsonValue = Field(default=None, alias="scheduledAt")

    def is_complete(self) -> bool:
        return bool(self.name and self.description and self.scheduled_at)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
