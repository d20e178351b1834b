# vsconnect/common/hashing.py
from typing import Protocol

from passlib.context import CryptContext

# Configuración de seguridad para hashing
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher(Protocol):
    """Capacidad de transformar una contraseña en una credencial irreversible."""

    def hash(self, password: str) -> str: ...


class Argon2PasswordHasher:
    """Hasher por defecto, respaldado por ``pwd_context`` (argon2)."""

    def hash(self, password: str) -> str:
        return get_password_hash(password)


def get_password_hash(password: str) -> str:
    """Genera un hash seguro de una contraseña.

    Args:
        password: Contraseña en texto plano

    Returns:
        str: Hash de la contraseña
    """
    return pwd_context.hash(password)
