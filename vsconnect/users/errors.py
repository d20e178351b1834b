"""Errores específicos para el módulo de usuarios."""

from typing import Any
from uuid import UUID

from fastapi import status

from vsconnect.common.errors import (
    AppError,
    ErrorCode,
    ResourceNotFoundError,
    ValidationError,
)


class UserNotFoundError(ResourceNotFoundError):
    """Excepción lanzada cuando no se encuentra un usuario específico."""

    def __init__(self, user_id: UUID | str | None = None) -> None:
        self.user_id = user_id
        super().__init__(
            message="Usuário não encontrado",
            resource_name="usuario",
            resource_id=str(user_id) if user_id is not None else None,
        )


class UserAlreadyExistsError(AppError):
    """Excepción lanzada cuando se intenta registrar un email ya existente."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=ErrorCode.DUPLICATE_ENTRY,
            message="Esse email já está cadastrado",
            detail={"email": email},
        )


class UserValidationError(ValidationError):
    """Datos de usuario inválidos. ``field`` indica el campo problemático."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        detail: dict[str, Any] = {"field": field, "reason": reason}
        super().__init__(detail=detail, message=f"Campo inválido: {field}")
