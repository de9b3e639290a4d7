import pytest
from pydantic import ValidationError

from conjunto.exceptions import ResourceError
from conjunto.services.auth_service import AuthService
from tests.fake_backend import TOKEN


async def test_login_persists_token_and_user(api, storage):
    auth = AuthService(api)

    data = await auth.login("admin@conjunto.co", "secreto")

    assert data["token"] == TOKEN
    assert storage.get_item("token") == TOKEN
    assert storage.get_item("user")["email"] == "admin@conjunto.co"
    assert "password" not in storage.get_item("user")
    assert auth.is_authenticated()


async def test_requests_after_login_are_authorized(api, backend):
    backend.state.require_auth = True
    await AuthService(api).login("admin@conjunto.co", "secreto")

    users = await api.get_users()

    assert backend.state.requests[-1]["authorization"] == f"Bearer {TOKEN}"
    assert users[0]["name"] == "Administración"


async def test_invalid_credentials_store_nothing(api, storage):
    with pytest.raises(ResourceError) as exc_info:
        await AuthService(api).login("admin@conjunto.co", "otra")

    assert exc_info.value.error == "Credenciales inválidas"
    assert storage.get_item("token") is None


async def test_missing_password_is_rejected_before_calling_backend(api, backend):
    with pytest.raises(ValidationError):
        await AuthService(api).login("admin@conjunto.co", None)

    assert backend.state.requests == []


async def test_logout_clears_both_keys(api, storage):
    auth = AuthService(api)
    await auth.login("admin@conjunto.co", "secreto")

    auth.logout()

    assert storage.get_item("token") is None
    assert auth.current_user() is None
    assert not auth.is_authenticated()
