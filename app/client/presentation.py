"""
➡️ But : Rendu texte de la liste (vue dérivée, aucun état persistant).

Le statut d'échéance est recalculé à chaque rendu via classify_due_date.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from app.client.due_dates import DueStatus, classify_due_date
from app.client.models import Task

EMPTY_MESSAGE = "No todos yet"

_DUE_LABELS = {
    DueStatus.OVERDUE: "Overdue",
    DueStatus.TODAY: "Due today",
    DueStatus.TOMORROW: "Due tomorrow",
}


def due_label(task: Task, now: Optional[datetime] = None) -> Optional[str]:
    status = classify_due_date(task.due_date, now)
    if status is DueStatus.NONE:
        return None
    if status is DueStatus.UPCOMING:
        return f"Due {task.due_date.date().isoformat()}"
    return _DUE_LABELS[status]


def render_task(
    task: Task, now: Optional[datetime] = None, *, show_id: bool = False
) -> List[str]:
    box = "[x]" if task.is_completed else "[ ]"
    head = f"{box} {task.title}"
    lines = [f"{head}  ({task.id})" if show_id else head]
    if task.description:
        lines.append(f"    {task.description}")

    meta = [f"Created: {task.created_at.date().isoformat()}"]
    if task.completed_at:
        meta.append(f"Completed: {task.completed_at.date().isoformat()}")
    label = due_label(task, now)
    if label:
        meta.append(label)
    lines.append("    " + " | ".join(meta))
    return lines


def render_tasks(
    tasks: Iterable[Task], now: Optional[datetime] = None, *, show_ids: bool = False
) -> str:
    lines: List[str] = []
    for task in tasks:
        lines.extend(render_task(task, now, show_id=show_ids))
    if not lines:
        return EMPTY_MESSAGE
    return "\n".join(lines)
