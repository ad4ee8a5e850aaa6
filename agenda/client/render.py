"""Display rules for the agenda board: ordering, status markers, cards and statistics.

Everything here works in the local timezone. Naive timestamps (the usual
`YYYY-MM-DDTHH:MM` form coming from a datetime-local input) are read as local
time; aware ones are converted to it.
"""

import html
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any, Iterable, List, Optional

from ..models import Task

URGENT_WINDOW = timedelta(hours=2)

OVERDUE = "overdue"
URGENT = "urgent"
NEUTRAL = "neutral"

_STATUS_ICONS = {
    OVERDUE: "fas fa-exclamation-triangle",
    URGENT: "fas fa-fire",
    NEUTRAL: "fas fa-clock",
}


@dataclass(frozen=True)
class Statistics:
    total: int
    today: int
    upcoming: int


def local_now() -> datetime:
    return datetime.now().astimezone()


def to_local(value: datetime) -> datetime:
    """Aware local datetime; naive input is taken to already be local."""
    return value.astimezone()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into local time, None when it cannot be read."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return to_local(datetime.fromisoformat(text))
    except ValueError:
        return None


def default_scheduled_at(now: Optional[datetime] = None) -> str:
    """Default value of the scheduling field: now, local, minute precision."""
    now = to_local(now) if now else local_now()
    return now.strftime("%Y-%m-%dT%H:%M")


def sort_for_display(tasks: Iterable[Task]) -> List[Task]:
    """New list ordered by scheduled time ascending; unreadable times go last."""

    def key(task: Task):
        when = parse_timestamp(task.scheduled_at)
        return (when is None, when.timestamp() if when else 0.0)

    return sorted(tasks, key=key)


def task_status(task: Task, now: Optional[datetime] = None) -> str:
    now = to_local(now) if now else local_now()
    when = parse_timestamp(task.scheduled_at)
    if when is None:
        return NEUTRAL
    if when < now:
        return OVERDUE
    if when > now and when - now < URGENT_WINDOW:
        return URGENT
    return NEUTRAL


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def format_scheduled(task: Task) -> str:
    when = parse_timestamp(task.scheduled_at)
    return when.strftime("%d/%m/%Y %H:%M") if when else _as_text(task.scheduled_at)


def format_created(task: Task) -> str:
    when = parse_timestamp(task.created_at)
    return when.strftime("%d/%m %H:%M") if when else _as_text(task.created_at)


def compute_statistics(tasks: Iterable[Task], now: Optional[datetime] = None) -> Statistics:
    """Total count, count scheduled within today's local day, count still ahead."""
    now = to_local(now) if now else local_now()
    # Each bound carries its own UTC offset; they differ on DST change days.
    start_of_day = datetime.combine(now.date(), time()).astimezone()
    start_of_tomorrow = datetime.combine(now.date() + timedelta(days=1), time()).astimezone()

    total = today = upcoming = 0
    for task in tasks:
        total += 1
        when = parse_timestamp(task.scheduled_at)
        if when is None:
            continue
        if start_of_day <= when < start_of_tomorrow:
            today += 1
        if when > now:
            upcoming += 1
    return Statistics(total=total, today=today, upcoming=upcoming)


def escape(text) -> str:
    return html.escape(str(text))


def render_card(task: Task, now: Optional[datetime] = None) -> str:
    status = task_status(task, now)
    return (
        f'<div class="task-card task-{status}">\n'
        f'  <div class="task-header">\n'
        f'    <div class="task-name">{escape(task.name)}</div>\n'
        f'    <div class="task-time {status}">'
        f'<i class="{_STATUS_ICONS[status]}"></i> {escape(format_scheduled(task))}</div>\n'
        f'  </div>\n'
        f'  <div class="task-description">{escape(task.description)}</div>\n'
        f'  <div class="task-footer">\n'
        f'    <div class="task-created"><i class="fas fa-plus-circle"></i> '
        f'Created {escape(format_created(task))}</div>\n'
        f'    <button class="delete-btn" data-id="{int(task.id)}">Remove</button>\n'
        f'  </div>\n'
        f'</div>'
    )


EMPTY_STATE = (
    '<div class="empty-state">\n'
    '  <h3>No tasks yet</h3>\n'
    '  <p>Add your first task to get started!</p>\n'
    '</div>'
)


def render_tasks(tasks: Iterable[Task], now: Optional[datetime] = None) -> str:
    """HTML for the task container: cards in display order, or the empty state."""
    ordered = sort_for_display(tasks)
    if not ordered:
        return EMPTY_STATE
    return "\n".join(render_card(task, now) for task in ordered)


def render_board(tasks: Iterable[Task], now: Optional[datetime] = None) -> str:
    """Standalone HTML page with statistics and the task list."""
    tasks = list(tasks)
    stats = compute_statistics(tasks, now)
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8"><title>Shared Agenda</title></head>\n'
        "<body>\n"
        '<div class="stats">\n'
        f'  <span id="totalTasks">{stats.total}</span>\n'
        f'  <span id="todayTasks">{stats.today}</span>\n'
        f'  <span id="upcomingTasks">{stats.upcoming}</span>\n'
        "</div>\n"
        f'<div id="tasksContainer">\n{render_tasks(tasks, now)}\n</div>\n'
        "</body></html>\n"
    )


def render_text(tasks: Iterable[Task], now: Optional[datetime] = None) -> str:
    """Plain-text list for the console, one line per task in display order."""
    ordered = sort_for_display(tasks)
    if not ordered:
        return "No tasks yet. Add your first task to get started!"
    markers = {OVERDUE: "!", URGENT: "*", NEUTRAL: " "}
    lines = []
    for task in ordered:
        status = task_status(task, now)
        lines.append(
            f"{markers[status]} [{task.id}] {format_scheduled(task)}  {task.name}: "
            f"{task.description}  (created {format_created(task)})"
        )
    return "\n".join(lines)
