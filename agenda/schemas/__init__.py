from .task import ErrorResponse, MessageResponse, TaskCreate

__all__ = ["ErrorResponse", "MessageResponse", "TaskCreate"]
