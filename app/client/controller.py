"""
➡️ But : État côté client de la liste de tâches, avec mises à jour optimistes.

TodoController possède la seule liste en mémoire ; elle n'est modifiée que par :

fetch_all() : remplace la liste par celle du serveur (vide en cas d'échec, jamais de données périmées).

toggle(id) : bascule localement tout de suite, puis PUT ; rollback complet si l'appel échoue.

delete(id) : retire localement tout de suite, puis DELETE ; réinsertion à l'index d'origine si échec.

add(title, due_date) : pas d'optimisme, on attend le serveur puis on recharge la liste.

Les échecs sont signalés via notify(level, message), jamais levés à l'appelant.
Aucune relance automatique : l'utilisateur peut réessayer.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Protocol

from app.client.models import Task
from app.core.config import settings
from app.core.errors import BackendError
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"

Notifier = Callable[[str, str], None]


class TodoApi(Protocol):
    async def list_todos(self) -> List[Task]: ...

    async def create_todo(
        self,
        *,
        title: str,
        user_id: str,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Task: ...

    async def update_todo(self, todo_id: str, **changes) -> Task: ...

    async def delete_todo(self, todo_id: str) -> str: ...


def _log_notifier(level: str, message: str) -> None:
    if level == ERROR:
        logger.warning(message)
    else:
        logger.info(message)


class TodoController:
    def __init__(
        self,
        api: TodoApi,
        *,
        notify: Optional[Notifier] = None,
        user_id: Optional[str] = None,
    ):
        self.api = api
        self.notify: Notifier = notify or _log_notifier
        # pas d'authentification : toutes les créations vont à l'utilisateur anonyme configuré
        self.user_id = user_id or settings.ANONYMOUS_USER_ID

        self.todos: List[Task] = []
        self.loading: bool = True
        self.is_adding: bool = False

        # saisie en attente (champ titre + date choisie)
        self.new_title: str = ""
        self.new_due_date: Optional[datetime] = None

    # --------------- Helpers ---------------

    def _index_of(self, todo_id: str) -> Optional[int]:
        for i, todo in enumerate(self.todos):
            if todo.id == todo_id:
                return i
        return None

    # --------------- Refresh ---------------

    async def fetch_all(self) -> None:
        try:
            self.todos = list(await self.api.list_todos())
        except BackendError as e:
            logger.warning("Error fetching todos: %s", e)
            self.todos = []
        finally:
            self.loading = False

    # --------------- Toggle ---------------

    async def toggle(self, todo_id: str) -> None:
        index = self._index_of(todo_id)
        if index is None:
            return

        previous = self.todos[index]
        now = utcnow()
        becoming_completed = not previous.is_completed
        self.todos[index] = previous.model_copy(
            update={
                "is_completed": becoming_completed,
                "completed_at": now if becoming_completed else None,
                "updated_at": now,
            }
        )

        try:
            updated = await self.api.update_todo(todo_id, is_completed=becoming_completed)
        except BackendError as e:
            logger.warning("Error updating todo %s: %s", todo_id, e)
            # la position a pu bouger si la liste a changé entre-temps
            current = self._index_of(todo_id)
            if current is not None:
                self.todos[current] = previous
            self.notify(ERROR, "Failed to update the task")
            return

        current = self._index_of(todo_id)
        if current is not None:
            self.todos[current] = updated

    # --------------- Delete ---------------

    async def delete(self, todo_id: str) -> None:
        index = self._index_of(todo_id)
        if index is None:
            return

        removed = self.todos.pop(index)

        try:
            await self.api.delete_todo(todo_id)
        except BackendError as e:
            logger.warning("Error deleting todo %s: %s", todo_id, e)
            self.todos.insert(min(index, len(self.todos)), removed)
            self.notify(ERROR, "Failed to delete the task")
            return

        self.notify(SUCCESS, "Task deleted")

    # --------------- Add ---------------

    async def add(self, title: Optional[str] = None, due_date: Optional[datetime] = None) -> None:
        if title is not None:
            self.new_title = title
        if due_date is not None:
            self.new_due_date = due_date
        if not self.new_title.strip():
            return

        self.is_adding = True
        try:
            await self.api.create_todo(
                title=self.new_title,
                user_id=self.user_id,
                due_date=self.new_due_date,
            )
        except BackendError as e:
            logger.warning("Error adding todo: %s", e)
            self.notify(ERROR, "Failed to add the task")
            return
        finally:
            self.is_adding = False

        self.new_title = ""
        self.new_due_date = None
        await self.fetch_all()
