"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

documenter les conventions (format des erreurs, dates).

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches (users / todos).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC, format ISO 8601.\n"
            "- Les erreurs sont renvoyées sous la forme `{\"error\": \"...\"}`.\n"
            "- 400 : entrée invalide, 404 : id inconnu, 500 : échec du store.\n"
            "- Pas de pagination : les listes renvoient tous les éléments.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
