"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, logs, CORS, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Task-API"
    ENV: str = "dev"  # dev | prod | test
    API_PREFIX: str = "/api/v1"

    # -----------------------------
    # Serveur HTTP
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # Le front (navigateur) appelle l'API depuis une autre origine
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "tasks.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # si défini : fichier tasks.log en plus de la console

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        object.__setattr__(self, "LOG_LEVEL", self.LOG_LEVEL.upper())


# Instance globale importable partout
settings = Settings()
