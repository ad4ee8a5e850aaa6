"""Error taxonomy shared by the store and the API handlers."""

from typing import Optional

from fastapi import status


class AgendaError(Exception):
    """Base error carrying the HTTP status and the message sent to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AgendaError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "name, description and scheduledAt are required"


class NotFoundError(AgendaError):
    """No task carries the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "task not found"


class StorageError(AgendaError):
    """The agenda file could not be read, parsed or written."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal server error"
