from .task import AgendaDocument, Task, utc_timestamp

# Export all models for easy importing
__all__ = ["AgendaDocument", "Task", "utc_timestamp"]
