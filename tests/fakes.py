# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from app.client.models import Task
from app.core.errors import BackendError


def make_task(task_id: str, *, title: Optional[str] = None, is_completed: bool = False) -> Task:
    ts = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)
    return Task(
        id=task_id,
        user_id="u1",
        title=title or f"task {task_id}",
        is_completed=is_completed,
        completed_at=ts if is_completed else None,
        created_at=ts,
        updated_at=ts,
    )


class FakeTodoApi:
    """
    Fake TodoApiClient for controller unit tests.

    - Keeps a server-side list
    - Each operation can be made to fail with fail_<op> = True
    - Captures calls for assertions
    """

    def __init__(self, tasks: Optional[list[Task]] = None) -> None:
        self.server: list[Task] = list(tasks or [])
        self.calls: list[tuple] = []
        self.fail_list = False
        self.fail_create = False
        self.fail_update = False
        self.fail_delete = False
        self.seen_during_call: list[list[Task]] = []
        self.controller = None

    def _snapshot(self) -> None:
        if self.controller is not None:
            self.seen_during_call.append(list(self.controller.todos))

    async def list_todos(self) -> list[Task]:
        self.calls.append(("list",))
        if self.fail_list:
            raise BackendError("GET /todos failed")
        return list(self.server)

    async def create_todo(self, *, title, user_id, description=None, due_date=None) -> Task:
        self.calls.append(("create", title, user_id, due_date))
        if self.fail_create:
            raise BackendError("POST /todos failed")
        task = make_task(f"new-{len(self.server)}", title=title)
        task = task.model_copy(update={"user_id": user_id, "due_date": due_date})
        self.server.append(task)
        return task

    async def update_todo(self, todo_id: str, **changes) -> Task:
        self.calls.append(("update", todo_id, changes))
        self._snapshot()
        if self.fail_update:
            raise BackendError("PUT failed")
        for i, t in enumerate(self.server):
            if t.id == todo_id:
                done = changes["is_completed"]
                server_ts = datetime(2025, 6, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
                self.server[i] = t.model_copy(
                    update={
                        "is_completed": done,
                        "completed_at": server_ts if done else None,
                        "updated_at": server_ts,
                    }
                )
                return self.server[i]
        raise BackendError("Todo not found")

    async def delete_todo(self, todo_id: str) -> str:
        self.calls.append(("delete", todo_id))
        self._snapshot()
        if self.fail_delete:
            raise BackendError("DELETE failed")
        self.server = [t for t in self.server if t.id != todo_id]
        return "Todo deleted successfully"


