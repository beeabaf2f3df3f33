"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir d’une session DB.

get_user_service() : idem pour UserService.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.users import UserRepository
from app.features.users.services import UserService

from app.db.repositories.todos import TodoRepository
from app.features.todos.services import TodoService


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repo)

def get_todo_service(
    todo_repo: TodoRepository = Depends(get_todo_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> TodoService:
    return TodoService(repo=todo_repo, user_repo=user_repo)
