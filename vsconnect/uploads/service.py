"""Servicio de subida de imágenes a disco local.

Las imágenes se guardan con un nombre aleatorio dentro de ``UPLOAD_DIR`` y se
publican bajo ``UPLOAD_BASE_URL`` (montado como estáticos en ``main``).
"""

import asyncio
import logging
import mimetypes
import os
import uuid
from pathlib import Path
from typing import Protocol

from vsconnect.uploads.errors import ImageUploadError
from vsconnect.uploads.schemas import ImagePayload

logger = logging.getLogger(__name__)


class ImageUploader(Protocol):
    """Colaborador que guarda una imagen y devuelve su URL pública."""

    async def upload(self, image: ImagePayload) -> str: ...

    async def delete(self, url: str) -> None: ...


def guess_extension(image: ImagePayload) -> str:
    """Deduce la extensión del archivo a partir del nombre o del tipo MIME."""
    if image.filename:
        suffix = Path(os.path.basename(image.filename)).suffix.lower()
        if suffix and suffix[1:].isalnum():
            return suffix
    if image.content_type:
        ext = mimetypes.guess_extension(image.content_type.split(";")[0].strip())
        if ext:
            return ".jpg" if ext == ".jpe" else ext
    return ""


class LocalImageUploader:
    """Guarda imágenes en un directorio local."""

    def __init__(self, upload_dir: str | Path, base_url: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.base_url = base_url.rstrip("/")

    async def upload(self, image: ImagePayload) -> str:
        """
        Guarda la imagen y devuelve la URL con la que se puede recuperar.

        Raises:
            ImageUploadError: si la imagen está vacía o no se pudo escribir.
        """
        if image.is_empty:
            raise ImageUploadError(detail="Imagem vazia")

        name = f"{uuid.uuid4().hex}{guess_extension(image)}"
        target = self.upload_dir / name

        def _write() -> None:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(image.content)

        # Escritura en un thread para no bloquear el event loop
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, _write)
        except OSError as e:
            logger.error(f"Error al guardar la imagen {target}: {e}", exc_info=True)
            raise ImageUploadError(detail=str(e)) from e

        logger.info(f"Imagen guardada en {target} ({image.size} bytes)")
        return f"{self.base_url}/{name}"

    def _path_for(self, url: str) -> Path | None:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            return None
        name = url[len(prefix):]
        if not name or name != os.path.basename(name):
            return None
        return self.upload_dir / name

    async def delete(self, url: str) -> None:
        """
        Elimina una imagen subida previamente por este uploader.

        Las URLs que no pertenecen a ``base_url`` se ignoran.

        Raises:
            ImageUploadError: si el archivo existe pero no se pudo borrar.
        """
        target = self._path_for(url)
        if target is None:
            logger.warning(f"URL de imagen ajena al directorio de subidas: {url}")
            return

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, lambda: target.unlink(missing_ok=True))
        except OSError as e:
            logger.error(f"Error al eliminar la imagen {target}: {e}", exc_info=True)
            raise ImageUploadError(detail=str(e)) from e

        logger.info(f"Imagen eliminada: {target}")
