import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional, Union

import httpx
import pydantic

from ..config import POLL_INTERVAL_SECONDS
from ..models import Task
from . import render
from .render import Statistics
from .api import AgendaApi

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"

# Failures that degrade to a notice instead of propagating.
_CLIENT_ERRORS = (httpx.HTTPError, pydantic.ValidationError, ValueError)


def _log_notice(message: str, kind: str) -> None:
    level = logging.WARNING if kind == ERROR else logging.INFO
    logger.log(level, "%s", message)


def _always_confirm(prompt: str) -> bool:
    return True


class AgendaClient:
    """Cached copy of the server's task list plus the add/remove/poll flow.

    `tasks` is replaced on every successful fetch and patched after every
    successful add or remove; it is never touched when a request fails.
    """

    def __init__(
        self,
        api: AgendaApi,
        *,
        confirm: Callable[[str], bool] = _always_confirm,
        notify: Callable[[str, str], None] = _log_notice,
        html_path: Optional[Union[str, Path]] = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ):
        self.api = api
        self.tasks: List[Task] = []
        self.default_scheduled_at = ""
        self.statistics = Statistics(total=0, today=0, upcoming=0)
        self.poll_interval = poll_interval
        self._confirm = confirm
        self._notify = notify
        self._html_path = Path(html_path) if html_path else None
        self._poll_stop = threading.Event()
        self._poll_thread: Optional[threading.Thread] = None

    # ---- lifecycle ----

    def start(self) -> None:
        """Initial fetch and render, then poll in the background."""
        self.reset_form()
        self.refresh()
        self.update_statistics()
        self.start_polling()

    def start_polling(self) -> None:
        if self._poll_thread is not None:
            return
        self._poll_stop.clear()
        self._poll_thread = threading.Thread(target=self._poll_loop, name="agenda-poll", daemon=True)
        self._poll_thread.start()

    def stop_polling(self) -> None:
        self._poll_stop.set()
        if self._poll_thread is not None:
            self._poll_thread.join(timeout=1.0)
            self._poll_thread = None

    def _poll_loop(self) -> None:
        # Each tick fires its own refresh; a slow fetch does not delay the next tick.
        while not self._poll_stop.wait(self.poll_interval):
            threading.Thread(target=self.refresh, name="agenda-refresh", daemon=True).start()

    # ---- operations ----

    def refresh(self) -> bool:
        """Fetch the full list from the server and re-render."""
        try:
            tasks = self.api.list_tasks()
        except _CLIENT_ERRORS:
            logger.exception("Failed to load tasks")
            self.notify("Failed to load tasks", ERROR)
            return False

        self.tasks = tasks
        self.render_board()
        self.update_statistics()
        return True

    def add_task(self, name: str, description: str, scheduled_at: str) -> Optional[Task]:
        name = (name or "").strip()
        description = (description or "").strip()
        scheduled_at = scheduled_at or ""

        if not name or not description or not scheduled_at:
            self.notify("Please fill in all fields", ERROR)
            return None

        try:
            created = self.api.create_task(name, description, scheduled_at)
        except _CLIENT_ERRORS:
            logger.exception("Failed to add task")
            self.notify("Failed to add task", ERROR)
            return None

        self.tasks.append(created)
        self.render_board()
        self.update_statistics()
        self.reset_form()
        self.notify("Task added!", SUCCESS)
        return created

    def remove_task(self, task_id: int) -> bool:
        if not self._confirm("Are you sure you want to remove this task?"):
            return False

        try:
            self.api.delete_task(task_id)
        except _CLIENT_ERRORS:
            logger.exception("Failed to remove task id=%s", task_id)
            self.notify("Failed to remove task", ERROR)
            return False

        self.tasks = [task for task in self.tasks if task.id != task_id]
        self.render_board()
        self.update_statistics()
        self.notify("Task removed!", SUCCESS)
        return True

    # ---- view ----

    def render_board(self) -> str:
        """Rebuild the board; written to `html_path` when one is configured."""
        board = render.render_board(self.tasks)
        if self._html_path is not None:
            try:
                self._html_path.write_text(board, encoding="utf-8")
            except OSError:
                logger.exception("Failed to write board to %s", self._html_path)
        return board

    def update_statistics(self) -> Statistics:
        self.statistics = render.compute_statistics(self.tasks)
        return self.statistics

    def reset_form(self) -> None:
        self.default_scheduled_at = render.default_scheduled_at()

    def notify(self, message: str, kind: str = SUCCESS) -> None:
        self._notify(message, kind)
