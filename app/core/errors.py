"""
➡️ But : Taxonomie d'erreurs commune au serveur et au client.

ValidationError → 400 (champ requis manquant, entrée malformée)

NotFoundError → 404 (id inconnu)

BackendError → 500 côté serveur (échec du store), ou échec réseau côté client

register_exception_handlers(app) convertit ces exceptions en corps JSON {"error": ...}.

🔹 Avantages :

Les services ne connaissent pas HTTP ; les routes restent sans try/except.

Aucun détail interne (SQL, trace) ne fuit vers le client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TodoAppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(TodoAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class BackendError(TodoAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Backend failure"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    missing = []
    for err in exc.errors():
        if err.get("type") == "missing":
            loc = err.get("loc") or ()
            if loc:
                missing.append(str(loc[-1]))
    if missing:
        return f"Missing required field(s): {', '.join(missing)}"
    return "Malformed request body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TodoAppError)
    async def _todo_app_error(request: Request, exc: TodoAppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        # 404 / 405 de routage : même enveloppe {"error"} que les erreurs métier
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(SQLAlchemyError)
    async def _store_error(request: Request, exc: SQLAlchemyError):
        # filet de sécurité : normalement converti en BackendError par les services
        logger.exception("Unhandled store error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
