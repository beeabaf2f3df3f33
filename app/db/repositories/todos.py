from app.db.repositories.base import BaseRepository
from app.db.models.todos import Todo


class TodoRepository(BaseRepository[Todo]):
    model = Todo
