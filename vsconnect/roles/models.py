"""Roles de cuenta disponibles para los usuarios.

Cada rol tiene una etiqueta estable que se usa como representación externa
(JSON, base de datos y nombres de autorización).
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles de cuenta. El valor de cada miembro es su etiqueta externa."""

    ADMIN = "admin"
    DEVELOPER = "dev"
    CLIENT = "cliente"

    @property
    def label(self) -> str:
        """Etiqueta estable del rol (ej: ``"cliente"``)."""
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "UserRole | None":
        # Acepta también el nombre del miembro y los nombres originales en portugués
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for role in cls:
            if key in (role.value, role.name.lower()):
                return role
        return _ROLE_ALIASES.get(key)


_ROLE_ALIASES = {"desenvolvedor": UserRole.DEVELOPER}
