"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model) enveloppés : {todos}, {todo}, {message}

Les erreurs (400 / 404 / 500) sont levées par le service et converties en {"error": ...}
par les handlers enregistrés dans app.core.errors.

🔹 Avantages :

Automatiquement documentée dans Swagger :

summary, description, response_model, examples

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, status
from app.api.dependencies import get_todo_service
from app.features.todos.schemas import (
    ErrorOut,
    MessageOut,
    TodoCreateIn,
    TodoEnvelope,
    TodoListOut,
    TodoOut,
    TodoUpdateIn,
)
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        404: {"model": ErrorOut, "description": "Not Found"},
        500: {"model": ErrorOut, "description": "Backend failure"},
    },
)

@router.get(
    "",
    summary="Lister les todos",
    description="Retourne toutes les tâches, dans l'ordre du store (pas de pagination).",
    response_model=TodoListOut,
    responses={
        200: {
            "description": "Liste complète",
            "content": {
                "application/json": {
                    "example": {"todos": [{"id": "8c1f0c1e-2f0b-4a4e-9d0e-6a7f3c2b1a00",
                                           "user_id": "00000000-0000-0000-0000-000000000000",
                                           "title": "Buy milk", "description": None,
                                           "is_completed": False, "due_date": None,
                                           "reminder_time": None, "completed_at": None,
                                           "created_at": "2025-01-01T10:00:00Z",
                                           "updated_at": "2025-01-01T10:00:00Z"}]}
                }
            },
        }
    },
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return {"todos": [TodoOut.model_validate(t) for t in svc.list()]}

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoEnvelope,
    responses={400: {"model": ErrorOut, "description": "title / user_id manquant"}},
)
def create_todo(payload: TodoCreateIn, svc: TodoService = Depends(get_todo_service)):
    return {"todo": TodoOut.model_validate(svc.create(payload))}

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoEnvelope,
)
def get_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    return {"todo": TodoOut.model_validate(svc.get(todo_id))}

@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Mise à jour partielle : seuls les champs présents dans le corps sont modifiés.",
    response_model=TodoEnvelope,
    responses={400: {"model": ErrorOut, "description": "Entrée invalide"}},
)
def update_todo(todo_id: str, payload: TodoUpdateIn, svc: TodoService = Depends(get_todo_service)):
    return {"todo": TodoOut.model_validate(svc.update(todo_id, payload))}

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    response_model=MessageOut,
)
def delete_todo(todo_id: str, svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return {"message": "Todo deleted successfully"}
