"""
Módulo de rutas de la API para la gestión de usuarios.

Este módulo define los endpoints CRUD de ``/usuarios``: listado, detalle,
creación, reemplazo y eliminación.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from vsconnect.common.errors import handle_error
from vsconnect.common.result import is_failure

from . import schemas
from .dependencies import get_user_service, parse_user_input
from .service import UserService

router = APIRouter()

_BODY_DESCRIPTION = (
    "Acepta multipart/form-data (campos name, email, password, role e imagen "
    "opcional en `image`) o JSON con los mismos campos y la imagen en base64."
)


@router.get(
    "",
    response_model=list[schemas.UserPublic],
    summary="Listar usuarios",
    description="Obtiene todos los usuarios registrados.",
)
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[schemas.UserPublic]:
    result = await user_service.list_users()
    if is_failure(result):
        raise handle_error(result.failure())

    return [schemas.UserPublic.model_validate(usuario) for usuario in result.unwrap()]


@router.get(
    "/{user_id}",
    response_model=schemas.UserPublic,
    summary="Obtener un usuario por ID",
    description="Obtiene los detalles de un usuario específico por su ID.",
)
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> schemas.UserPublic:
    """
    Obtiene un usuario por su ID.

    Raises:
        HTTPException: 404 si el usuario no existe.
    """
    result = await user_service.get_user(user_id)
    if is_failure(result):
        raise handle_error(result.failure())

    return schemas.UserPublic.model_validate(result.unwrap())


@router.post(
    "",
    response_model=schemas.UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un nuevo usuario",
    description=_BODY_DESCRIPTION,
)
async def create_user(
    user_input: schemas.UserInput = Depends(parse_user_input),
    user_service: UserService = Depends(get_user_service),
) -> schemas.UserPublic:
    """
    Crea un nuevo usuario.

    Raises:
        HTTPException: 400 si el email ya está registrado, 422 si los datos
            son inválidos o 500 si falla la subida de la imagen.
    """
    result = await user_service.create_user(user_input)
    if is_failure(result):
        raise handle_error(result.failure())

    return schemas.UserPublic.model_validate(result.unwrap())


@router.put(
    "/{user_id}",
    response_model=schemas.UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Actualizar un usuario",
    description="Reemplaza todos los campos del usuario. " + _BODY_DESCRIPTION,
)
async def update_user(
    user_id: UUID,
    user_input: schemas.UserInput = Depends(parse_user_input),
    user_service: UserService = Depends(get_user_service),
) -> schemas.UserPublic:
    """
    Reemplaza los datos de un usuario.

    Raises:
        HTTPException: 404 si el usuario no existe, 422 si los datos son inválidos.
    """
    result = await user_service.update_user(user_id, user_input)
    if is_failure(result):
        raise handle_error(result.failure())

    return schemas.UserPublic.model_validate(result.unwrap())


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Eliminar un usuario",
    description="Elimina un usuario del sistema de forma definitiva.",
)
async def delete_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    result = await user_service.delete_user(user_id)
    if is_failure(result):
        raise handle_error(result.failure())

    # 204 no admite cuerpo
    return Response(status_code=status.HTTP_204_NO_CONTENT)
