"""
Dependencias de FastAPI para el módulo de usuarios.

Construye el ``UserService`` con sus colaboradores por petición y convierte
el cuerpo de la petición (JSON o multipart) en un ``UserInput``.
"""

import base64
import binascii
import json
import logging
from typing import Any

from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from vsconnect.common.config import settings
from vsconnect.common.database import get_db
from vsconnect.common.errors import handle_error
from vsconnect.common.hashing import Argon2PasswordHasher, PasswordHasher
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.uploads.service import ImageUploader, LocalImageUploader
from vsconnect.users.errors import UserValidationError
from vsconnect.users.repository import UserRepository
from vsconnect.users.schemas import UserInput
from vsconnect.users.service import UserService

logger = logging.getLogger(__name__)

IMAGE_FIELDS = ("image", "imagem")
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def get_password_hasher() -> PasswordHasher:
    return Argon2PasswordHasher()


def get_image_uploader() -> ImageUploader:
    return LocalImageUploader(settings.UPLOAD_DIR, settings.UPLOAD_BASE_URL)


def get_user_service(
    db: AsyncSession = Depends(get_db),
    image_uploader: ImageUploader = Depends(get_image_uploader),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    """Crea el servicio de usuarios para la petición actual."""
    return UserService(
        UserRepository(db),
        image_uploader,
        password_hasher,
        max_image_bytes=settings.MAX_IMAGE_BYTES,
    )


async def read_upload_bytes(file: UploadFile, *, max_bytes: int) -> bytes:
    """
    Lee un UploadFile en memoria respetando un límite duro.

    Lee por trozos para no cargar archivos gigantes antes de rechazarlos.
    """
    if max_bytes <= 0:
        return await file.read()

    chunk_size = 256 * 1024
    data = bytearray()
    while True:
        piece = await file.read(chunk_size)
        if not piece:
            break
        data.extend(piece)
        if len(data) > max_bytes:
            raise UserValidationError("image", f"tamanho máximo de {max_bytes} bytes")
    return bytes(data)


def decode_base64_image(value: str) -> ImagePayload:
    """Decodifica una imagen enviada como base64 o como data URI."""
    content_type = None
    encoded = value.strip()
    if encoded.startswith("data:") and "," in encoded:
        header, encoded = encoded.split(",", 1)
        content_type = header[len("data:"):].split(";")[0] or None
    try:
        content = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise UserValidationError("image", "imagem base64 inválida")
    return ImagePayload(content=content, content_type=content_type)


async def _read_form(request: Request) -> dict[str, Any]:
    form = await request.form()
    data: dict[str, Any] = {}
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key in IMAGE_FIELDS:
                content = await read_upload_bytes(value, max_bytes=settings.MAX_IMAGE_BYTES)
                data[key] = ImagePayload(
                    content=content,
                    filename=value.filename,
                    content_type=value.content_type,
                )
        else:
            data[key] = value
    return data


async def _read_json(request: Request) -> dict[str, Any]:
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise UserValidationError("body", "JSON inválido")
    if not isinstance(data, dict):
        raise UserValidationError("body", "o corpo deve ser um objeto JSON")

    for key in IMAGE_FIELDS:
        value = data.get(key)
        if isinstance(value, str):
            data[key] = decode_base64_image(value) if value.strip() else None
    return data


async def parse_user_input(request: Request) -> UserInput:
    """
    Convierte el cuerpo de la petición en un ``UserInput``.

    Acepta ``multipart/form-data`` (con la imagen como archivo) o JSON (con la
    imagen opcional en base64).

    Raises:
        HTTPException: 422 si el cuerpo no se puede interpretar.
    """
    content_type = request.headers.get("content-type", "").lower()
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            data = await _read_form(request)
        else:
            data = await _read_json(request)
        return UserInput.model_validate(data)
    except UserValidationError as e:
        raise handle_error(e)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "body"
        logger.info(f"Cuerpo de usuario inválido en el campo {field}: {first['msg']}")
        raise handle_error(UserValidationError(field, first["msg"]))
