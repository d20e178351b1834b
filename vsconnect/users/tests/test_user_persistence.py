"""Pruebas de UserService con una sesión SQLAlchemy real (SQLite)."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from vsconnect.common.database import Base
from vsconnect.common.result import Success, is_failure
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.uploads.service import LocalImageUploader
from vsconnect.users.errors import UserAlreadyExistsError
from vsconnect.users.models import Usuario
from vsconnect.users.repository import UserRepository
from vsconnect.users.schemas import UserInput
from vsconnect.users.service import UserService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture
async def session(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'usuarios.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def service(session, upload_dir, password_hasher):
    return UserService(
        UserRepository(session),
        LocalImageUploader(upload_dir, base_url="/uploads"),
        password_hasher,
    )


def _png():
    return ImagePayload(content=PNG_BYTES, filename="foto.png", content_type="image/png")


@pytest.mark.asyncio
class TestUserPersistence:
    async def test_create_and_fetch(self, service):
        created = (
            await service.create_user(UserInput(name="Ana", email="ana@x.com", password="a"))
        ).unwrap()

        fetched = (await service.get_user(created.id)).unwrap()

        assert fetched.email == "ana@x.com"
        assert fetched.password_hash != "a"

    async def test_update_to_taken_email_returns_already_exists(
        self, service, session, upload_dir
    ):
        await service.create_user(UserInput(name="Ana", email="ana@x.com", password="a"))
        bia = (
            await service.create_user(UserInput(name="Bia", email="bia@x.com", password="b"))
        ).unwrap()
        bia_id = bia.id

        result = await service.update_user(
            bia_id, UserInput(name="Bia", email="ana@x.com", password="b", image=_png())
        )

        assert is_failure(result)
        assert isinstance(result.failure(), UserAlreadyExistsError)
        assert result.failure().status_code == 400
        assert result.failure().email == "ana@x.com"

        stored = await session.get(Usuario, bia_id)
        assert stored.email == "bia@x.com"
        assert not upload_dir.exists() or list(upload_dir.iterdir()) == []

    async def test_concurrent_create_is_rejected_by_unique_email(
        self, service, session, upload_dir, monkeypatch
    ):
        await service.create_user(UserInput(name="Ana", email="ana@x.com", password="a"))

        # Otra petición registró el email entre la comprobación y el guardado
        async def email_not_found(email):
            return Success(None)

        monkeypatch.setattr(service.user_repository, "find_by_email", email_not_found)

        result = await service.create_user(
            UserInput(name="Ana 2", email="ana@x.com", password="b", image=_png())
        )

        assert isinstance(result.failure(), UserAlreadyExistsError)
        assert len((await service.list_users()).unwrap()) == 1
        assert list(upload_dir.iterdir()) == []

    async def test_delete_removes_row(self, service):
        created = (
            await service.create_user(UserInput(name="Ana", email="ana@x.com", password="a"))
        ).unwrap()
        created_id = created.id

        assert not is_failure(await service.delete_user(created_id))
        assert is_failure(await service.get_user(created_id))
