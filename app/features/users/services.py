"""
➡️ But : Contenir la logique métier côté utilisateurs.

UserService : liste les utilisateurs, convertit les échecs du store en BackendError.
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import BackendError
from app.db.repositories.users import UserRepository
from app.db.models.users import User

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def list(self) -> Sequence[User]:
        try:
            return self.repo.list_all()
        except SQLAlchemyError:
            logger.exception("Error fetching users")
            raise BackendError("Failed to fetch users")
