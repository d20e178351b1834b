"""Modelos SQLAlchemy para el dominio de Usuarios.

Este módulo define el modelo de base de datos de los usuarios,
utilizando SQLAlchemy ORM con soporte asíncrono.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vsconnect.common.database import Base
from vsconnect.roles.models import UserRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Usuario(Base):
    """Modelo que representa un usuario registrado en el sistema."""

    __tablename__ = "usuarios"
    __table_args__ = {
        "comment": "Almacena la información de los usuarios del sistema",
    }

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )

    name: Mapped[str] = mapped_column(
        String(150), nullable=False, comment="Nombre del usuario"
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Correo electrónico del usuario (debe ser único)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Hash de la contraseña del usuario (nunca almacenar en texto plano)",
    )
    image_url: Mapped[Optional[str]] = mapped_column(
        String(512), nullable=True, comment="URL de la imagen de perfil del usuario"
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            values_callable=lambda roles: [role.value for role in roles],
        ),
        default=UserRole.CLIENT,
        nullable=False,
        comment="Rol de la cuenta (admin, dev, cliente)",
    )

    # Auditoría
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Usuario {self.email}>"
