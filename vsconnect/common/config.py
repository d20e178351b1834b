"""Módulo de configuración de la aplicación.

Este módulo proporciona una forma de cargar y validar la configuración
desde variables de entorno, con valores por defecto y tipos fuertes.
"""

from functools import lru_cache
from typing import Any

from pydantic import EmailStr, Field, SecretStr, field_validator, model_validator
from pydantic.networks import PostgresDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración principal de la aplicación.

    Los valores se leen de variables de entorno o del archivo ``.env``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )
    # ======================
    # Configuración de la aplicación
    # ======================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    PROJECT_NAME: str = Field(
        "VSConnect API",
        description="Nombre del proyecto para documentación y metadatos",
    )
    VERSION: str = Field("0.1.0", description="Versión de la API")

    # Dominios permitidos para CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(
            "CORS_ORIGINS debe ser una lista o una cadena separada por comas"
        )

    # ======================
    # Base de datos
    # ======================
    DATABASE_URL: PostgresDsn | None = None
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_CREATE_TABLES: bool = Field(
        True, description="Crea las tablas al iniciar la aplicación si no existen"
    )

    # ======================
    # Subida de imágenes
    # ======================
    UPLOAD_DIR: str = Field(
        "uploads", description="Directorio local donde se guardan las imágenes"
    )
    UPLOAD_BASE_URL: str = Field(
        "/uploads", description="Prefijo público de las URLs de imágenes subidas"
    )
    MAX_IMAGE_BYTES: int = Field(
        5 * 1024 * 1024, description="Tamaño máximo aceptado para una imagen"
    )

    # ======================
    # Logging
    # ======================
    LOG_FILE: str | None = None
    LOG_LEVEL: str = "INFO"

    # ======================
    # Configuraciones de desarrollo
    # ======================
    FIRST_ADMIN_NAME: str = Field(
        "Administrador", description="Nombre del primer administrador"
    )
    FIRST_ADMIN_EMAIL: EmailStr | None = Field(
        None, description="Email del primer administrador (solo desarrollo)"
    )
    FIRST_ADMIN_PASSWORD: SecretStr | None = Field(
        None, description="Contraseña del primer administrador (solo desarrollo)"
    )

    @model_validator(mode="before")
    @classmethod
    def assemble_db_connection(cls, values: dict[str, Any]) -> dict[str, Any]:
        # Si ya hay una URL de base de datos, no hacer nada
        if values.get("DATABASE_URL"):
            return values

        # Construir la URL de conexión a partir de variables individuales
        db_url = PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=values.get("POSTGRES_USER", "postgres"),
            password=values.get("POSTGRES_PASSWORD", "postgres"),
            host=values.get("POSTGRES_HOST", "localhost"),
            port=int(values.get("POSTGRES_PORT", 5432)),
            path=values.get("POSTGRES_DB", "vsconnect"),
        )
        values["DATABASE_URL"] = str(db_url)
        return values


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración de la aplicación.

    Esta función está decorada con @lru_cache para evitar múltiples lecturas
    del archivo .env y mantener una única instancia de configuración.

    Returns:
        Settings: Instancia de configuración cargada desde las variables de entorno.
    """
    return Settings()


# Instancia de configuración para importación directa
settings = get_settings()
