from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from vsconnect.common.result import Failure, Success
from vsconnect.roles.models import UserRole
from vsconnect.uploads.errors import ImageUploadError
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.users.errors import UserAlreadyExistsError, UserNotFoundError
from vsconnect.users.models import Usuario
from vsconnect.users.schemas import UserInput
from vsconnect.users.service import UserService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class InMemoryUserRepository:
    """Repositorio en memoria con la misma interfaz que UserRepository."""

    def __init__(self):
        self.records: dict[UUID, Usuario] = {}
        self.save_calls = 0
        self.delete_calls = 0

    async def find_all(self):
        return Success(list(self.records.values()))

    async def find_by_id(self, user_id):
        usuario = self.records.get(user_id)
        if usuario is None:
            return Failure(UserNotFoundError(user_id=user_id))
        return Success(usuario)

    async def find_by_email(self, email):
        for usuario in self.records.values():
            if usuario.email == email:
                return Success(usuario)
        return Success(None)

    async def save(self, usuario):
        self.save_calls += 1
        for other in self.records.values():
            if other.email == usuario.email and other.id != usuario.id:
                return Failure(UserAlreadyExistsError(email=usuario.email))
        now = datetime.now(timezone.utc)
        if usuario.id is None:
            usuario.id = uuid4()
            usuario.created_at = now
        usuario.updated_at = now
        self.records[usuario.id] = usuario
        return Success(usuario)

    async def delete(self, usuario):
        self.delete_calls += 1
        self.records.pop(usuario.id, None)
        return Success(None)


class FakeImageUploader:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.uploads: list[ImagePayload] = []
        self.deleted: list[str] = []

    async def upload(self, image):
        if self.fail:
            raise ImageUploadError(detail="disco cheio")
        self.uploads.append(image)
        return f"/uploads/imagem-{len(self.uploads)}.png"

    async def delete(self, url):
        self.deleted.append(url)


class FakePasswordHasher:
    """Hash no determinista, suficiente para distinguir cada llamada."""

    def __init__(self):
        self.calls = 0

    def hash(self, password):
        self.calls += 1
        return f"hashed${self.calls}${password[::-1]}"


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def image_uploader():
    return FakeImageUploader()


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def user_service(user_repository, image_uploader, password_hasher):
    return UserService(
        user_repository, image_uploader, password_hasher, max_image_bytes=1024
    )


@pytest.fixture
def ana_input():
    return UserInput(
        name="Ana", email="ana@x.com", password="secret", role=UserRole.CLIENT
    )


@pytest.fixture
def png_image():
    return ImagePayload(content=PNG_BYTES, filename="foto.png", content_type="image/png")


@pytest.fixture
def failing_image_uploader():
    return FakeImageUploader(fail=True)
