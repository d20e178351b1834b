import asyncio
import sys
from pathlib import Path

# Agregar el directorio raíz al PYTHONPATH para importar correctamente los módulos
sys.path.append(str(Path(__file__).parent))

from vsconnect.common.config import settings
from vsconnect.common.database import AsyncSessionLocal, create_tables, engine
from vsconnect.common.hashing import Argon2PasswordHasher
from vsconnect.common.result import get_or_raise
from vsconnect.roles.models import UserRole
from vsconnect.uploads.service import LocalImageUploader
from vsconnect.users.repository import UserRepository
from vsconnect.users.schemas import UserInput
from vsconnect.users.service import UserService


async def init_db() -> None:
    if not settings.FIRST_ADMIN_EMAIL or not settings.FIRST_ADMIN_PASSWORD:
        print("⚠️ Defina FIRST_ADMIN_EMAIL y FIRST_ADMIN_PASSWORD en el entorno o en .env")
        return

    print(f"Creando tablas en {settings.DATABASE_URL} si no existen...")
    await create_tables()

    async with AsyncSessionLocal() as session:
        repository = UserRepository(session)
        service = UserService(
            repository,
            LocalImageUploader(settings.UPLOAD_DIR, settings.UPLOAD_BASE_URL),
            Argon2PasswordHasher(),
        )

        existing = get_or_raise(await repository.find_by_email(settings.FIRST_ADMIN_EMAIL))
        if existing is not None:
            print(f"⚠️ El administrador ya existe: {existing.email}")
            return

        print("Creando usuario administrador...")
        admin = get_or_raise(
            await service.create_user(
                UserInput(
                    name=settings.FIRST_ADMIN_NAME,
                    email=settings.FIRST_ADMIN_EMAIL,
                    password=settings.FIRST_ADMIN_PASSWORD,
                    role=UserRole.ADMIN,
                )
            )
        )
        print(f"✅ Administrador creado con éxito: {admin.email} (ID: {admin.id})")
        print("✅ URL Swagger: http://localhost:8000/docs")


async def main():
    print("Inicializando base de datos...")
    try:
        await init_db()
    finally:
        await engine.dispose()
    print("Proceso completado.")


if __name__ == "__main__":
    asyncio.run(main())
