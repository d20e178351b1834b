"""Validación de los datos de entrada de usuarios.

Las comprobaciones se hacen antes de cualquier efecto secundario (subida de
imagen, hash o escritura en base de datos).
"""

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from vsconnect.common.config import settings
from vsconnect.roles.models import UserRole
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.users.errors import UserValidationError
from vsconnect.users.schemas import UserInput, ValidatedUserInput

_email_adapter = TypeAdapter(EmailStr)


def _required_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise UserValidationError(field, "campo obrigatório")
    return value.strip()


def _validate_email(value: str | None) -> str:
    email = _required_text(value, "email")
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        raise UserValidationError("email", "formato de email inválido")
    return email


def _validate_role(value: UserRole | str | None) -> UserRole:
    if value is None or (isinstance(value, str) and not value.strip()):
        return UserRole.CLIENT
    try:
        return UserRole(value)
    except ValueError:
        allowed = ", ".join(role.label for role in UserRole)
        raise UserValidationError("role", f"valores permitidos: {allowed}")


def _validate_image(
    image: ImagePayload | None, max_bytes: int
) -> ImagePayload | None:
    if image is None or image.is_empty:
        return None
    if max_bytes > 0 and image.size > max_bytes:
        raise UserValidationError("image", f"tamanho máximo de {max_bytes} bytes")
    if image.content_type and not image.content_type.startswith("image/"):
        raise UserValidationError("image", "o arquivo deve ser uma imagem")
    return image


def validate_user_input(
    user_input: UserInput, max_image_bytes: int | None = None
) -> ValidatedUserInput:
    """
    Valida los datos de un usuario.

    Args:
        user_input: Datos recibidos del cliente.
        max_image_bytes: Límite de tamaño de imagen; por defecto ``MAX_IMAGE_BYTES``.

    Returns:
        ValidatedUserInput con los valores normalizados.

    Raises:
        UserValidationError: con el nombre del primer campo inválido.
    """
    if max_image_bytes is None:
        max_image_bytes = settings.MAX_IMAGE_BYTES

    name = _required_text(user_input.name, "name")
    email = _validate_email(user_input.email)

    password = user_input.password.get_secret_value() if user_input.password else None
    if not password or not password.strip():
        raise UserValidationError("password", "campo obrigatório")

    return ValidatedUserInput(
        name=name,
        email=email,
        password=user_input.password,
        role=_validate_role(user_input.role),
        image=_validate_image(user_input.image, max_image_bytes),
    )
