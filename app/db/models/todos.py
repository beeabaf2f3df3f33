from datetime import datetime
from typing import Optional
from sqlmodel import Field
from sqlalchemy import Column, DateTime, ForeignKey, String

from .base import BaseModelDB


TITLE_MAX_LENGTH = 255


class Todo(BaseModelDB, table=True):
    """
    Tâche appartenant à un utilisateur.
    completed_at est renseigné si et seulement si is_completed est vrai.
    """
    __tablename__ = "todos"

    # FK obligatoire vers users, suppression en cascade côté DB
    user_id: str = Field(
        sa_column=Column(
            String(36),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Propriétaire de la tâche",
    )

    title: str = Field(max_length=TITLE_MAX_LENGTH, nullable=False)
    description: Optional[str] = Field(default=None)
    is_completed: bool = Field(default=False, nullable=False)

    due_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    # réservé : aucun rappel n'est envoyé par le serveur
    reminder_time: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
