import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from sqlmodel import Session, select

from app.core.config import settings
from app.db.models.users import User
from app.db.models.todos import Todo
from app.utils.dates import as_utc, utcnow

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Helpers
# -----------------------------
def _parse_datetime(value: Any) -> Optional[datetime]:
    """YAML fournit déjà des datetime pour les dates ISO ; on accepte aussi les chaînes."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, str):
        return as_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    # yaml transforme "2025-01-01" en date
    return as_utc(datetime(value.year, value.month, value.day))


# -----------------------------
# Anonymous user
# -----------------------------
def ensure_anonymous_user(session: Session) -> User:
    """
    Crée l'utilisateur anonyme configuré s'il n'existe pas.
    Toutes les tâches créées sans authentification lui sont rattachées.
    """
    user = session.get(User, settings.ANONYMOUS_USER_ID)
    if user:
        return user

    user = User(
        id=settings.ANONYMOUS_USER_ID,
        email=settings.ANONYMOUS_USER_EMAIL,
        name=settings.ANONYMOUS_USER_NAME,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("✅ Utilisateur anonyme créé (%s).", user.id)
    return user


# -----------------------------
# Seed Users
# -----------------------------
def seed_users(session: Session, data: Dict[str, Any]) -> int:
    users: List[Dict[str, Any]] = data.get("users", [])
    if not users:
        logger.warning("⚠️ Aucun utilisateur dans le YAML (clé 'users').")
        return 0

    existing = {u.email for u in session.exec(select(User)).all()}
    to_insert = [
        User(
            email=u["email"],
            name=u.get("name"),
            avatar_url=u.get("avatar_url"),
        )
        for u in users
        if u["email"] not in existing
    ]
    if not to_insert:
        logger.info("ℹ️ Les utilisateurs existent déjà, aucune insertion effectuée.")
        return 0

    session.add_all(to_insert)
    session.commit()
    logger.info("✅ %d utilisateurs insérés.", len(to_insert))
    return len(to_insert)


# -----------------------------
# Seed Todos
# -----------------------------
def seed_todos(session: Session, data: Dict[str, Any]) -> int:
    """
    Seed idempotent des todos.
    - Chaque entrée référence son propriétaire via `user_email`.
    - Une tâche (title + propriétaire) déjà présente n'est pas réinsérée.
    """
    todos: List[Dict[str, Any]] = data.get("todos", [])
    if not todos:
        logger.info("ℹ️ Aucun todo dans le YAML (clé 'todos'), aucune insertion effectuée.")
        return 0

    email_to_id = {u.email: u.id for u in session.exec(select(User)).all()}

    inserted = 0
    skipped_existing = 0
    for t in todos:
        title = t["title"]
        user_email = t.get("user_email", settings.ANONYMOUS_USER_EMAIL)
        user_id = email_to_id.get(user_email)
        if not user_id:
            raise ValueError(f"user_email inconnu '{user_email}' pour todo '{title}'")

        existing = session.exec(
            select(Todo).where(Todo.title == title, Todo.user_id == user_id)
        ).first()
        if existing:
            skipped_existing += 1
            continue

        is_completed = bool(t.get("is_completed", False))
        session.add(
            Todo(
                title=title,
                description=t.get("description"),
                user_id=user_id,
                due_date=_parse_datetime(t.get("due_date")),
                is_completed=is_completed,
                completed_at=utcnow() if is_completed else None,
            )
        )
        inserted += 1

    session.commit()
    logger.info("✅ Todos insérés : %d | ignorés (déjà présents) : %d.", inserted, skipped_existing)
    return inserted


# -----------------------------
# Main entrypoint
# -----------------------------
def seed_all(session: Session, seed_path: str | Path) -> None:
    data = load_seed_yaml(seed_path)

    ensure_anonymous_user(session)
    seed_users(session, data)
    seed_todos(session, data)
