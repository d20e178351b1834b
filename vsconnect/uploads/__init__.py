"""
Módulo de subida de imágenes.

Recibe los bytes de una imagen, la guarda y devuelve la URL pública con la
que se referencia desde los registros de usuario.
"""

from . import errors, schemas, service
from .errors import ImageUploadError
from .schemas import ImagePayload
from .service import ImageUploader, LocalImageUploader

__all__ = [
    "errors",
    "schemas",
    "service",
    "ImageUploadError",
    "ImagePayload",
    "ImageUploader",
    "LocalImageUploader",
]
