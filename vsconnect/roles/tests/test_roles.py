import pytest

from vsconnect.roles.models import UserRole


def test_labels():
    assert [role.label for role in UserRole] == ["admin", "dev", "cliente"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("admin", UserRole.ADMIN),
        ("ADMIN", UserRole.ADMIN),
        ("dev", UserRole.DEVELOPER),
        ("developer", UserRole.DEVELOPER),
        ("Desenvolvedor", UserRole.DEVELOPER),
        (" cliente ", UserRole.CLIENT),
        ("CLIENT", UserRole.CLIENT),
    ],
)
def test_lookup_by_label_or_name(raw, expected):
    assert UserRole(raw) is expected


@pytest.mark.parametrize("raw", ["gerente", "", 1, None])
def test_unknown_role_raises(raw):
    with pytest.raises(ValueError):
        UserRole(raw)


def test_role_serializes_as_label():
    assert UserRole.CLIENT == "cliente"
