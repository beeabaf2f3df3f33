"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

logging

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

handlers d'erreurs ({"error": ...} pour 400 / 404 / 500)

schéma OpenAPI personnalisé

Inclut les routers sous /api (health, todos, users).

Initialise la base au démarrage (@app.on_event("startup")) et garantit l'utilisateur anonyme.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.openapi import custom_openapi
from app.db.seed import ensure_anonymous_user
from app.db.session import engine, init_db

from app.api.routers import health, todos, users

import uvicorn

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "health", "description": "État de l'API"},
        {"name": "todos", "description": "Opérations CRUD sur les tâches"},
        {"name": "users", "description": "Lecture des utilisateurs"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(health.router, prefix="/api")
app.include_router(todos.router, prefix="/api")
app.include_router(users.router, prefix="/api")

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()
    with Session(engine) as session:
        ensure_anonymous_user(session)
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
