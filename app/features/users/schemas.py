"""
➡️ But : Définir les formats de sortie de l’API pour les utilisateurs.

UserOut → un utilisateur ; UserListOut → enveloppe {users}
"""

from typing import List, Optional

from pydantic import BaseModel

from app.utils.dates import UtcDatetime

class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

    model_config = {"from_attributes": True}

class UserListOut(BaseModel):
    users: List[UserOut]
