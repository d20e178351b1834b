import pytest

from vsconnect.roles.models import UserRole
from vsconnect.uploads.schemas import ImagePayload
from vsconnect.users.errors import UserValidationError
from vsconnect.users.schemas import UserInput
from vsconnect.users.validators import validate_user_input


def _input(**overrides):
    data = {"name": "Ana", "email": "ana@x.com", "password": "secret"}
    data.update(overrides)
    return UserInput(**data)


def test_valid_input_is_normalized():
    data = validate_user_input(_input(name="  Ana  ", email=" ana@x.com "))

    assert data.name == "Ana"
    assert data.email == "ana@x.com"
    assert data.password.get_secret_value() == "secret"
    assert data.role == UserRole.CLIENT
    assert data.image is None


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": None}, "name"),
        ({"name": "   "}, "name"),
        ({"email": None}, "email"),
        ({"email": ""}, "email"),
        ({"email": "ana.x.com"}, "email"),
        ({"email": "ana@"}, "email"),
        ({"password": None}, "password"),
        ({"password": ""}, "password"),
        ({"password": "   "}, "password"),
        ({"role": "superuser"}, "role"),
    ],
)
def test_invalid_fields_are_named(overrides, field):
    with pytest.raises(UserValidationError) as exc_info:
        validate_user_input(_input(**overrides))

    assert exc_info.value.field == field
    assert exc_info.value.status_code == 422
    assert exc_info.value.detail["field"] == field


def test_name_is_checked_before_email():
    with pytest.raises(UserValidationError) as exc_info:
        validate_user_input(UserInput())

    assert exc_info.value.field == "name"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("admin", UserRole.ADMIN),
        ("DEV", UserRole.DEVELOPER),
        ("DESENVOLVEDOR", UserRole.DEVELOPER),
        ("CLIENTE", UserRole.CLIENT),
        (UserRole.CLIENT, UserRole.CLIENT),
        ("", UserRole.CLIENT),
    ],
)
def test_role_lookup(raw, expected):
    assert validate_user_input(_input(role=raw)).role == expected


def test_portuguese_aliases_are_accepted():
    user_input = UserInput.model_validate(
        {"nome": "Ana", "email": "ana@x.com", "senha": "secret", "tipo_usuario": "dev"}
    )

    data = validate_user_input(user_input)

    assert data.name == "Ana"
    assert data.role == UserRole.DEVELOPER


def test_empty_image_counts_as_no_image():
    data = validate_user_input(_input(image=ImagePayload(content=b"", filename="")))

    assert data.image is None


def test_image_too_large():
    image = ImagePayload(content=b"x" * 11, content_type="image/png")

    with pytest.raises(UserValidationError) as exc_info:
        validate_user_input(_input(image=image), max_image_bytes=10)

    assert exc_info.value.field == "image"


def test_image_must_be_an_image():
    image = ImagePayload(content=b"%PDF-1.7", content_type="application/pdf")

    with pytest.raises(UserValidationError) as exc_info:
        validate_user_input(_input(image=image), max_image_bytes=100)

    assert exc_info.value.field == "image"
