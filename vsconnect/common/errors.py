"""Módulo de errores personalizados para la aplicación.

Este módulo define las clases de error personalizadas utilizadas en toda la aplicación,
proporcionando un manejo de errores consistente y tipado.
"""

from enum import Enum
from typing import Any

from fastapi import HTTPException, status
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Códigos de error estandarizados para la aplicación.

    Los códigos de error siguen el formato: PREFIJO_NUMERO
    """

    # Errores de validación (2000-2999)
    VALIDATION_ERROR = "VALID_2000"

    # Errores de recursos (3000-3999)
    RESOURCE_NOT_FOUND = "RES_3000"
    DUPLICATE_ENTRY = "RES_3001"

    # Errores de base de datos (4000-4999)
    DATABASE_ERROR = "DB_4000"

    # Errores del servidor (5000-5999)
    INTERNAL_SERVER_ERROR = "SRV_5000"
    UPLOAD_FAILED = "SRV_5002"


class ErrorDetail(BaseModel):
    """Detalle de error estandarizado para respuestas de la API."""

    code: str = Field(..., description="Código de error único")
    message: str = Field(..., description="Mensaje de error descriptivo")
    detail: str | dict[str, Any] | list[Any] | None = Field(
        None, description="Detalles adicionales del error"
    )


class AppError(Exception):
    """Clase base para todos los errores de la aplicación.

    Args:
        status_code: Código de estado HTTP
        code: Código de error personalizado
        message: Mensaje de error descriptivo
        detail: Detalles adicionales del error
        headers: Encabezados HTTP opcionales
    """

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str | ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR,
        message: str = "Ocorreu um erro inesperado",
        detail: str | dict[str, Any] | list[Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.detail = detail
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convierte el error a un diccionario para la respuesta de la API."""
        error_detail = ErrorDetail(
            code=self.code, message=self.message, detail=self.detail
        )
        return {"error": error_detail.model_dump(exclude_none=True)}


class ResourceNotFoundError(AppError):
    """Excepción lanzada cuando no se encuentra un recurso solicitado."""

    def __init__(
        self,
        message: str = "Recurso não encontrado",
        resource_name: str = "recurso",
        resource_id: str | int | None = None,
    ) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=message,
            detail={"resource": resource_name, "id": resource_id},
        )


class ValidationError(AppError):
    """Excepción lanzada cuando falla la validación de datos."""

    def __init__(
        self,
        detail: str | dict[str, Any] | list[Any],
        message: str = "Erro de validação",
    ) -> None:
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            detail=detail,
        )


class DatabaseError(AppError):
    """Excepción lanzada cuando ocurre un error en la base de datos."""

    def __init__(self, detail: str | dict[str, Any] | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.DATABASE_ERROR,
            message="Erro no banco de dados",
            detail=detail,
        )


def handle_error(error: AppError) -> HTTPException:
    """Convierte un AppError en una HTTPException para FastAPI."""
    return HTTPException(
        status_code=error.status_code,
        detail=error.to_dict().get("error"),
        headers=error.headers,
    )
