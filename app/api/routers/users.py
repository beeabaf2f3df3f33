from fastapi import APIRouter, Depends
from app.api.dependencies import get_user_service
from app.features.todos.schemas import ErrorOut
from app.features.users.schemas import UserListOut, UserOut
from app.features.users.services import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={500: {"model": ErrorOut, "description": "Backend failure"}},
)

@router.get(
    "",
    summary="Lister les utilisateurs",
    description="Retourne tous les utilisateurs (pas de filtre, pas de pagination).",
    response_model=UserListOut,
)
def list_users(svc: UserService = Depends(get_user_service)):
    return {"users": [UserOut.model_validate(u) for u in svc.list()]}
