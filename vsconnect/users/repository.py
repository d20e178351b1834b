"""
Repositorio para operaciones de base de datos relacionadas con usuarios.

Este módulo proporciona funciones para interactuar con la tabla de usuarios
en la base de datos, siguiendo el patrón de repositorio.
"""

import logging
from typing import List, Optional, Protocol
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vsconnect.common.errors import DatabaseError
from vsconnect.common.result import Failure, Result, Success
from vsconnect.users.errors import UserAlreadyExistsError, UserNotFoundError
from vsconnect.users.models import Usuario

logger = logging.getLogger(__name__)


class AbstractUserRepository(Protocol):
    """Operaciones de almacenamiento que necesita ``UserService``."""

    async def find_all(self) -> Result[List[Usuario], DatabaseError]: ...

    async def find_by_id(
        self, user_id: UUID
    ) -> Result[Usuario, UserNotFoundError | DatabaseError]: ...

    async def find_by_email(
        self, email: str
    ) -> Result[Optional[Usuario], DatabaseError]: ...

    async def save(
        self, usuario: Usuario
    ) -> Result[Usuario, UserAlreadyExistsError | DatabaseError]: ...

    async def delete(self, usuario: Usuario) -> Result[None, DatabaseError]: ...


class UserRepository:
    """Repositorio de usuarios respaldado por una sesión SQLAlchemy asíncrona."""

    def __init__(self, db: AsyncSession):
        """Inicializa el repositorio con una sesión de base de datos."""
        self.db = db

    async def find_all(self) -> Result[List[Usuario], DatabaseError]:
        """
        Lista todos los usuarios, sin filtros ni paginación.

        Returns:
            Result con la lista de usuarios o un DatabaseError.
        """
        try:
            result = await self.db.execute(select(Usuario).order_by(Usuario.created_at))
            return Success(list(result.scalars().all()))
        except SQLAlchemyError as e:
            logger.error(f"Error de base de datos al listar usuarios: {str(e)}", exc_info=True)
            return Failure(DatabaseError(detail="Erro ao listar usuários"))

    async def find_by_id(
        self, user_id: UUID
    ) -> Result[Usuario, UserNotFoundError | DatabaseError]:
        """
        Obtiene un usuario por su ID.

        Args:
            user_id: ID del usuario a buscar.

        Returns:
            Result con el usuario encontrado o un error UserNotFoundError/DatabaseError.
        """
        try:
            usuario = await self.db.get(Usuario, user_id)
            if usuario is None:
                return Failure(UserNotFoundError(user_id=user_id))
            return Success(usuario)
        except SQLAlchemyError as e:
            logger.error(f"Error de base de datos al obtener usuario por ID {user_id}: {str(e)}", exc_info=True)
            return Failure(DatabaseError(detail=f"Erro ao buscar usuário {user_id}"))

    async def find_by_email(self, email: str) -> Result[Optional[Usuario], DatabaseError]:
        """
        Busca un usuario por email (coincidencia exacta).

        Returns:
            Result con el usuario, ``None`` si no existe, o un DatabaseError.
        """
        try:
            result = await self.db.execute(select(Usuario).where(Usuario.email == email))
            return Success(result.scalar_one_or_none())
        except SQLAlchemyError as e:
            logger.error(f"Error de base de datos al obtener usuario por email {email}: {str(e)}", exc_info=True)
            return Failure(DatabaseError(detail="Erro ao buscar usuário por email"))

    async def save(
        self, usuario: Usuario
    ) -> Result[Usuario, UserAlreadyExistsError | DatabaseError]:
        """
        Inserta o actualiza un usuario.

        La restricción única de ``email`` convierte una inserción concurrente
        con el mismo email en ``UserAlreadyExistsError``.

        Args:
            usuario: Instancia nueva o ya cargada desde esta sesión.

        Returns:
            Result con el usuario persistido o un error.
        """
        # El rollback expira la instancia; los handlers solo usan estos valores
        email = usuario.email
        try:
            self.db.add(usuario)
            await self.db.commit()
            await self.db.refresh(usuario)
            return Success(usuario)
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Error de integridad al guardar usuario {email}: {e.orig}")
            return Failure(UserAlreadyExistsError(email=email))
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error de base de datos al guardar usuario {email}: {str(e)}", exc_info=True)
            return Failure(DatabaseError(detail="Erro ao salvar usuário"))

    async def delete(self, usuario: Usuario) -> Result[None, DatabaseError]:
        """
        Elimina definitivamente un usuario.

        Returns:
            Result con None si se eliminó, o un DatabaseError.
        """
        user_id = usuario.id
        try:
            await self.db.delete(usuario)
            await self.db.commit()
            return Success(None)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error de base de datos al eliminar usuario {user_id}: {str(e)}", exc_info=True)
            return Failure(DatabaseError(detail=f"Erro ao excluir usuário {user_id}"))
