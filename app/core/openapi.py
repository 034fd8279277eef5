"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée,

documenter les conventions (formats, erreurs).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches FastAPI + SQLModel.\n\n"
            "### Conventions\n"
            "- Corps de requête en `application/json`, champs inconnus refusés.\n"
            "- `created_at` au format RFC3339 UTC (`2025-01-01T10:00:00Z`) ou `null`.\n"
            "- Erreurs : texte brut, 400 (requête invalide) ou 500 (store / encodage).\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
