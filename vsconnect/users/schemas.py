"""
Esquemas Pydantic para el módulo de usuarios.

Este módulo define los modelos de entrada y salida de la API de usuarios.
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr

from vsconnect.roles.models import UserRole
from vsconnect.uploads.schemas import ImagePayload


class UserInput(BaseModel):
    """Datos enviados por el cliente para crear o reemplazar un usuario.

    No aplica reglas de negocio: los campos se comprueban después con
    ``validators.validate_user_input`` para poder informar el campo inválido.
    Acepta también los nombres de campo en portugués del formulario original.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = Field(
        None,
        validation_alias=AliasChoices("name", "nome"),
        description="Nombre del usuario",
    )
    email: str | None = Field(None, description="Correo electrónico del usuario")
    password: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("password", "senha"),
        description="Contraseña en texto plano",
    )
    role: UserRole | str | None = Field(
        None,
        validation_alias=AliasChoices("role", "tipo_usuario"),
        description="Rol de la cuenta (admin, dev, cliente)",
    )
    image: ImagePayload | None = Field(
        None,
        validation_alias=AliasChoices("image", "imagem"),
        description="Imagen de perfil opcional",
    )


class ValidatedUserInput(BaseModel):
    """Entrada de usuario ya validada, lista para la capa de servicio."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: SecretStr
    role: UserRole
    image: ImagePayload | None = None


# Esquema para datos públicos del usuario (sin campos sensibles)
class UserPublic(BaseModel):
    id: UUID
    name: str
    email: str
    role: UserRole
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,  # Permite crear desde instancias de modelo SQLAlchemy
        "json_schema_extra": {
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "name": "Ana",
                "email": "ana@x.com",
                "role": "cliente",
                "image_url": "/uploads/0f8e4c8b1b5e4f7c9d2a6b3c4d5e6f70.png",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
            }
        },
    }
