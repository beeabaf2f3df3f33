"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreateIn → corps de requête POST

TodoUpdateIn → corps PUT (mise à jour partielle)

TodoOut → une tâche ; TodoEnvelope / TodoListOut → enveloppes {todo} / {todos}

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation automatique.

Documente les champs dans Swagger (types, exemples...).
"""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, Field as PydField

from app.db.models.todos import TITLE_MAX_LENGTH
from app.utils.dates import UtcDatetime


def _blank_as_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# "" (champ date vidé côté formulaire) équivaut à null
DueDateIn = Annotated[Optional[UtcDatetime], BeforeValidator(_blank_as_none)]


# ---------- IN / UPDATE ----------

class TodoCreateIn(BaseModel):
    # title / user_id vérifiés par le service pour renvoyer un message explicite (400)
    title: Optional[str] = PydField(None, max_length=TITLE_MAX_LENGTH, examples=["Buy milk"])
    description: Optional[str] = PydField(None, examples=["2 liters"])
    user_id: Optional[str] = PydField(None, examples=["00000000-0000-0000-0000-000000000000"])
    due_date: DueDateIn = PydField(None, examples=["2025-01-01T10:00:00Z"])


class TodoUpdateIn(BaseModel):
    """Seuls les champs présents dans le corps sont appliqués (exclude_unset)."""
    title: Optional[str] = PydField(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    is_completed: Optional[bool] = PydField(None, examples=[True])
    due_date: DueDateIn = None


# ---------- OUT ----------

class TodoOut(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    is_completed: bool
    due_date: Optional[UtcDatetime] = None
    reminder_time: Optional[UtcDatetime] = None
    completed_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}


class TodoEnvelope(BaseModel):
    todo: TodoOut


class TodoListOut(BaseModel):
    todos: List[TodoOut]


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
