"""Módulo de configuración de la base de datos.

Este módulo proporciona la configuración inicial para SQLAlchemy,
incluyendo la creación de la sesión de base de datos y la clase Base para los modelos.
"""
from typing import Any, AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from vsconnect.common.config import settings

# Convenciones de nombres para constraints
# Ver: https://alembic.sqlalchemy.org/en/latest/naming.html
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """Clase base para todos los modelos SQLAlchemy."""

    metadata = metadata

    def update(self, **kwargs: Any) -> None:
        """Actualiza los atributos del modelo con los valores proporcionados."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)


DATABASE_URL = str(settings.DATABASE_URL)
engine = create_async_engine(
    DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_pre_ping=True,  # Verifica la conexión antes de usarla
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Importante para operaciones asíncronas
    autoflush=False,
)


async def create_tables() -> None:
    """Crea las tablas registradas en ``Base.metadata`` si no existen."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Obtiene una sesión de base de datos por petición.

    Hace commit al terminar la petición y rollback si se propaga una excepción.

    Yields:
        AsyncSession: Sesión de base de datos asíncrona
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
