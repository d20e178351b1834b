"""
Módulo de usuarios.

Este módulo contiene la lógica de negocio, modelos y rutas para la gestión de usuarios.
"""

from . import errors, models, schemas, service, validators
from .models import Usuario
from .schemas import UserInput, UserPublic, ValidatedUserInput
from .service import UserService

__all__ = [
    "models",
    "schemas",
    "service",
    "errors",
    "validators",
    "Usuario",
    "UserInput",
    "UserPublic",
    "ValidatedUserInput",
    "UserService",
]
