def make_task(task_id: int, scheduled_at: str, name: str = None, description: str = "desc") -> dict:
    """Task dict in the stored/wire shape."""
    return {
        "id": task_id,
        "name": name or f"Task {task_id}",
        "description": description,
        "scheduledAt": scheduled_at,
        "createdAt": "2024-01-01T08:00:00.000Z",
    }
