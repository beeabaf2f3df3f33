"""
➡️ But : Client HTTP de l'API todos (utilisé par le controller côté UI).

Chaque méthode correspond à un endpoint ; toute réponse non-2xx, erreur réseau
ou JSON illisible est convertie en BackendError.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.client.models import Task
from app.core.config import settings
from app.core.errors import BackendError

logger = logging.getLogger(__name__)


class TodoApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TodoApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ---------- Transport ----------

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise BackendError(f"{method} {path}: invalid JSON response") from e

        if response.is_error:
            message = data.get("error") if isinstance(data, dict) else None
            raise BackendError(message or f"{method} {path}: HTTP {response.status_code}")
        if not isinstance(data, dict):
            raise BackendError(f"{method} {path}: unexpected response shape")
        return data

    @staticmethod
    def _parse_task(data: Any) -> Task:
        try:
            return Task.model_validate(data)
        except PydanticValidationError as e:
            raise BackendError("Malformed todo in response") from e

    # ---------- Endpoints ----------

    async def list_todos(self) -> List[Task]:
        data = await self._request("GET", "/todos")
        todos = data.get("todos")
        if todos is None:
            return []
        if not isinstance(todos, list):
            raise BackendError("GET /todos: unexpected response shape")
        return [self._parse_task(t) for t in todos]

    async def create_todo(
        self,
        *,
        title: str,
        user_id: str,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        body: Dict[str, Any] = {"title": title, "user_id": user_id}
        if description:
            body["description"] = description
        if due_date is not None:
            body["due_date"] = due_date.isoformat()
        data = await self._request("POST", "/todos", json=body)
        return self._parse_task(data.get("todo"))

    async def update_todo(self, todo_id: str, **changes: Any) -> Task:
        body = {k: (v.isoformat() if isinstance(v, datetime) else v) for k, v in changes.items()}
        data = await self._request("PUT", f"/todos/{todo_id}", json=body)
        return self._parse_task(data.get("todo"))

    async def delete_todo(self, todo_id: str) -> str:
        data = await self._request("DELETE", f"/todos/{todo_id}")
        return data.get("message", "")
