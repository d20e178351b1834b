"""
Módulo de roles.

Define el conjunto cerrado de roles de cuenta que puede tener un usuario.
"""

from . import models
from .models import UserRole

__all__ = [
    "models",
    "UserRole",
]
