"""Errores específicos para el módulo de subida de imágenes."""

from fastapi import status

from vsconnect.common.errors import AppError, ErrorCode


class ImageUploadError(AppError):
    """Excepción lanzada cuando no se puede guardar una imagen."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.UPLOAD_FAILED,
            message="Não foi possível enviar a imagem",
            detail=detail,
        )
