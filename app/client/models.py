from typing import Optional

from pydantic import BaseModel

from app.utils.dates import UtcDatetime


class Task(BaseModel):
    """Tâche telle que reçue de l'API (JSON → modèle), copie locale du controller."""

    id: str
    user_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[UtcDatetime] = None
    reminder_time: Optional[UtcDatetime] = None
    completed_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
