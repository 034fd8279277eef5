"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (le front appelle l'API depuis le navigateur)

titre, version, tags

handler des ApiError (réponses texte brut)

schéma OpenAPI personnalisé

Inclut le router des tâches (ex : /api/v1/tasks).

Initialise les logs et la base au démarrage (@app.on_event("startup")).

Point unique d’exécution : uvicorn app.main:app --reload (ou python -m app.main).
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import ApiError, api_error_handler
from app.core.logging import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import tasks

import uvicorn

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "tasks", "description": "Lister, créer, modifier et supprimer des tâches"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

app.add_exception_handler(ApiError, api_error_handler)

# Routers
app.include_router(tasks.router, prefix=settings.API_PREFIX)

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    setup_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    init_db()
    logger.info("%s started (env=%s, prefix=%s)", settings.APP_NAME, settings.ENV, settings.API_PREFIX)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
