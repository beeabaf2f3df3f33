"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL DB, utilisateur anonyme, client, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.DATABASE_URL)


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
    APP_NAME: str = "Todo-Back"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "app.db"  # fichier SQLite
    # Une seule chaîne de connexion configure le store (ex: Postgres).
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # Utilisateur anonyme (pas d'authentification)
    # -----------------------------
    ANONYMOUS_USER_ID: str = "00000000-0000-0000-0000-000000000000"
    ANONYMOUS_USER_EMAIL: str = "anonymous@todo.local"
    ANONYMOUS_USER_NAME: str = "Anonymous"

    # -----------------------------
    # Client (controller côté UI)
    # -----------------------------
    API_BASE_URL: str = "http://127.0.0.1:8080/api"
    API_TIMEOUT_SECONDS: float = 10.0

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


# Instance globale importable partout
settings = Settings()
