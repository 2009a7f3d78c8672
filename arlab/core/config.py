# arlab/core/config.py

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Clave de desarrollo: en producción SECRET_KEY debe venir del entorno
DEFAULT_SECRET_KEY = "CLAVE_DE_DESARROLLO_ARLAB_CAMBIAR_EN_PRODUCCION"
# Orígenes por defecto del frontend en desarrollo
DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


class ConfigError(RuntimeError):
    """La configuración del entorno es inválida o incompleta."""


class Settings(BaseModel):
    """Configuración de la aplicación (se lee del entorno o se construye a mano)."""

    database_url: str
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    # Administrador inicial (opcional) para poder entrar la primera vez
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None
    admin_name: str = "Administrador"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """Carga el archivo .env (si existe) y construye la configuración."""
        load_dotenv(dotenv_path=dotenv_path)

        database_url = os.getenv("DATABASE_URL")
        if database_url is None:
            logger.critical("La variable de entorno 'DATABASE_URL' no se encontró.")
            raise ConfigError("DATABASE_URL no está definida.")

        secret_key = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
        if secret_key == DEFAULT_SECRET_KEY:
            logger.warning("SECRET_KEY no definida: se usa la clave de desarrollo.")

        data = {
            "database_url": database_url,
            "secret_key": secret_key,
            "algorithm": os.getenv("ALGORITHM", "HS256"),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "admin_email": os.getenv("ADMIN_EMAIL"),
            "admin_password": os.getenv("ADMIN_PASSWORD"),
            "admin_name": os.getenv("ADMIN_NAME", "Administrador"),
        }
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(**data)
