from fastapi import APIRouter

from app.utils.dates import utcnow

router = APIRouter(tags=["health"])

@router.get("/health", summary="Vérifier que l'API répond")
def health():
    return {"status": "OK", "timestamp": utcnow().isoformat()}
