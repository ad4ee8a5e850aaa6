from typing import List, Optional

import httpx

from ..config import AGENDA_API_URL
from ..models import Task


class AgendaApi:
    """Thin httpx wrapper around the three task endpoints.

    Non-2xx responses raise `httpx.HTTPStatusError`; transport problems raise
    the usual `httpx.HTTPError` subclasses.
    """

    def __init__(self, base_url: str = AGENDA_API_URL, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client()

    def close(self) -> None:
        self._client.close()

    def list_tasks(self) -> List[Task]:
        response = self._client.get(self.base_url)
        response.raise_for_status()
        return [Task.model_validate(item) for item in response.json()]

    def create_task(self, name: str, description: str, scheduled_at: str) -> Task:
        response = self._client.post(
            self.base_url,
            json={"name": name, "description": description, "scheduledAt": scheduled_at},
        )
        response.raise_for_status()
        return Task.model_validate(response.json())

    def delete_task(self, task_id: int) -> str:
        response = self._client.delete(f"{self.base_url}/{task_id}")
        response.raise_for_status()
        return response.json().get("message", "")
