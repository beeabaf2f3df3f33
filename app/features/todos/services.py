"""
➡️ But : Contenir la logique métier : orchestrer les repos, appliquer des règles, gérer les erreurs.

TodoService :
- valide les entrées avant tout appel au store (ValidationError → 400),
- distingue l'id inconnu (NotFoundError → 404),
- convertit tout échec du store en BackendError (500, message générique),
- maintient l'invariant completed_at ⇔ is_completed.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Any, Dict, Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import BackendError, NotFoundError, ValidationError
from app.db.models.todos import Todo
from app.db.repositories.todos import TodoRepository
from app.db.repositories.users import UserRepository
from app.features.todos.schemas import TodoCreateIn, TodoUpdateIn
from app.utils.dates import utcnow

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository, user_repo: UserRepository):
        self.repo = repo
        self.user_repo = user_repo

    # --------------- Queries ---------------

    def list(self) -> Sequence[Todo]:
        try:
            return self.repo.list_all()
        except SQLAlchemyError:
            logger.exception("Error fetching todos")
            raise BackendError("Failed to fetch todos")

    def get(self, todo_id: str) -> Todo:
        try:
            todo = self.repo.get(todo_id)
        except SQLAlchemyError:
            logger.exception("Error fetching todo %s", todo_id)
            raise BackendError("Failed to fetch todo")
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    # --------------- Commands ---------------

    def create(self, payload: TodoCreateIn) -> Todo:
        title = (payload.title or "").strip()
        user_id = (payload.user_id or "").strip()
        if not title or not user_id:
            raise ValidationError("Title and user_id are required")

        try:
            if not self.user_repo.exists(user_id):
                raise ValidationError("Unknown user_id")
            todo = self.repo.create(
                title=title,
                description=payload.description or None,
                user_id=user_id,
                due_date=payload.due_date,
                is_completed=False,
                completed_at=None,
            )
        except SQLAlchemyError:
            logger.exception("Error creating todo")
            raise BackendError("Failed to create todo")

        logger.info("Todo %s created for user %s", todo.id, user_id)
        return todo

    def update(self, todo_id: str, payload: TodoUpdateIn) -> Todo:
        changes: Dict[str, Any] = payload.model_dump(exclude_unset=True)

        if "title" in changes:
            title = (changes["title"] or "").strip()
            if not title:
                raise ValidationError("Title cannot be empty")
            changes["title"] = title
        if "is_completed" in changes:
            if changes["is_completed"] is None:
                raise ValidationError("is_completed must be a boolean")
            changes["completed_at"] = utcnow() if changes["is_completed"] else None

        changes["updated_at"] = utcnow()

        todo = self.get(todo_id)
        try:
            return self.repo.update(todo, **changes)
        except SQLAlchemyError:
            logger.exception("Error updating todo %s", todo_id)
            raise BackendError("Failed to update todo")

    def delete(self, todo_id: str) -> None:
        todo = self.get(todo_id)
        try:
            self.repo.delete(todo)
        except SQLAlchemyError:
            logger.exception("Error deleting todo %s", todo_id)
            raise BackendError("Failed to delete todo")
        logger.info("Todo %s deleted", todo_id)
