# vsconnect/users/service.py
import logging
from typing import List, Optional
from uuid import UUID

from vsconnect.common.errors import DatabaseError
from vsconnect.common.hashing import PasswordHasher
from vsconnect.common.result import Failure, Result, Success, is_failure
from vsconnect.uploads.errors import ImageUploadError
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.uploads.service import ImageUploader
from vsconnect.users.errors import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserValidationError,
)
from vsconnect.users.models import Usuario
from vsconnect.users.repository import AbstractUserRepository
from vsconnect.users.schemas import UserInput, ValidatedUserInput
from vsconnect.users.validators import validate_user_input

logger = logging.getLogger(__name__)


class UserService:
    """Orquesta el ciclo de vida de los usuarios.

    Los colaboradores (repositorio, subida de imágenes y hasher) se reciben
    por constructor. Todos los métodos devuelven un ``Result``.
    """

    def __init__(
        self,
        user_repository: AbstractUserRepository,
        image_uploader: ImageUploader,
        password_hasher: PasswordHasher,
        max_image_bytes: Optional[int] = None,
    ):
        self.user_repository = user_repository
        self.image_uploader = image_uploader
        self.password_hasher = password_hasher
        self.max_image_bytes = max_image_bytes

    async def list_users(self) -> Result[List[Usuario], DatabaseError]:
        """Obtiene todos los usuarios."""
        return await self.user_repository.find_all()

    async def get_user(self, user_id: UUID) -> Result[Usuario, UserNotFoundError | DatabaseError]:
        """Obtiene un usuario por su ID."""
        return await self.user_repository.find_by_id(user_id)

    async def create_user(
        self, user_input: UserInput
    ) -> Result[Usuario, UserValidationError | UserAlreadyExistsError | ImageUploadError | DatabaseError]:
        """
        Registra un nuevo usuario.

        1. Valida la entrada.
        2. Rechaza el email si ya está registrado.
        3. Sube la imagen (si hay) y hashea la contraseña.
        4. Persiste el registro; el repositorio asigna el ID.

        Si falla cualquier paso no se persiste nada; si falla el guardado se
        borra la imagen ya subida.
        """
        try:
            data = validate_user_input(user_input, self.max_image_bytes)
        except UserValidationError as e:
            return Failure(e)

        existing_result = await self.user_repository.find_by_email(data.email)
        if is_failure(existing_result):
            return existing_result
        if existing_result.unwrap() is not None:
            logger.info(f"Registro rechazado: el email {data.email} ya existe")
            return Failure(UserAlreadyExistsError(email=data.email))

        derived_result = await self._derive_credentials(data)
        if is_failure(derived_result):
            return derived_result
        image_url, password_hash = derived_result.unwrap()

        usuario = Usuario(
            name=data.name,
            email=data.email,
            role=data.role,
            image_url=image_url,
            password_hash=password_hash,
        )

        saved_result = await self.user_repository.save(usuario)
        if is_failure(saved_result):
            await self._discard_image(image_url)
        else:
            logger.info(f"Usuario creado: {saved_result.unwrap().id} ({data.email})")
        return saved_result

    async def update_user(
        self, user_id: UUID, user_input: UserInput
    ) -> Result[Usuario, UserNotFoundError | UserValidationError | UserAlreadyExistsError | ImageUploadError | DatabaseError]:
        """
        Reemplaza todos los campos de un usuario existente.

        La imagen y la contraseña se vuelven a procesar en cada actualización,
        aunque no hayan cambiado. Sin imagen en la entrada, ``image_url`` queda
        en ``None``. No se vuelve a comprobar la unicidad del email aquí; la
        restricción única del almacenamiento rechaza un email repetido.
        """
        found_result = await self.user_repository.find_by_id(user_id)
        if is_failure(found_result):
            return found_result
        usuario = found_result.unwrap()

        try:
            data = validate_user_input(user_input, self.max_image_bytes)
        except UserValidationError as e:
            return Failure(e)

        derived_result = await self._derive_credentials(data)
        if is_failure(derived_result):
            return derived_result
        image_url, password_hash = derived_result.unwrap()

        usuario.update(
            name=data.name,
            email=data.email,
            role=data.role,
            image_url=image_url,
            password_hash=password_hash,
        )

        saved_result = await self.user_repository.save(usuario)
        if is_failure(saved_result):
            await self._discard_image(image_url)
        else:
            logger.info(f"Usuario actualizado: {user_id}")
        return saved_result

    async def delete_user(self, user_id: UUID) -> Result[None, UserNotFoundError | DatabaseError]:
        """Elimina definitivamente un usuario por su ID."""
        found_result = await self.user_repository.find_by_id(user_id)
        if is_failure(found_result):
            return found_result

        deleted_result = await self.user_repository.delete(found_result.unwrap())
        if not is_failure(deleted_result):
            logger.info(f"Usuario eliminado: {user_id}")
        return deleted_result

    async def _derive_credentials(
        self, data: ValidatedUserInput
    ) -> Result[tuple[Optional[str], str], ImageUploadError]:
        """Sube la imagen (si hay) y calcula el hash de la contraseña."""
        image_url: Optional[str] = None
        if data.image is not None:
            upload_result = await self._upload_image(data.image)
            if is_failure(upload_result):
                return upload_result
            image_url = upload_result.unwrap()

        password_hash = self.password_hasher.hash(data.password.get_secret_value())
        return Success((image_url, password_hash))

    async def _upload_image(self, image: ImagePayload) -> Result[str, ImageUploadError]:
        try:
            return Success(await self.image_uploader.upload(image))
        except ImageUploadError as e:
            logger.error(f"Fallo al subir la imagen {image.filename!r}: {e.detail}")
            return Failure(e)
        except OSError as e:
            logger.error(f"Fallo de E/S al subir la imagen {image.filename!r}: {e}", exc_info=True)
            return Failure(ImageUploadError(detail=str(e)))


    async def _discard_image(self, image_url: Optional[str]) -> None:
        """Borra la imagen de un registro que no llegó a guardarse."""
        if image_url is None:
            return
        try:
            await self.image_uploader.delete(image_url)
        except ImageUploadError as e:
            # Se devuelve el error original del guardado
            logger.error(f"No se pudo eliminar la imagen huérfana {image_url}: {e.detail}")
