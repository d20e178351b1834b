"""
Esquemas Pydantic para el módulo de subida de imágenes.
"""

from pydantic import BaseModel, Field


class ImagePayload(BaseModel):
    """Imagen recibida en una petición, todavía sin guardar."""

    content: bytes = Field(..., repr=False, description="Bytes de la imagen")
    filename: str | None = Field(None, description="Nombre original del archivo")
    content_type: str | None = Field(None, description="Tipo MIME declarado")

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return not self.content
