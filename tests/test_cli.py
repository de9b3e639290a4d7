import httpx
import pytest

from conjunto.cli import build_parser, run


async def _run(client, *argv):
    args = build_parser().parse_args(list(argv))
    return await run(args, client)


async def test_login_then_whoami(client, storage, capsys):
    assert await _run(client, "login", "--email", "admin@conjunto.co", "--password", "secreto") == 0
    assert storage.get_item("token")

    assert await _run(client, "whoami") == 0

    out = capsys.readouterr().out
    assert "Sesión iniciada como Administración" in out
    assert "Administración <admin@conjunto.co> (Dueño)" in out


async def test_payments_listing(client, api, capsys):
    apartment = await api.create_apartment({"tower": "C", "floor": 1, "number": "101"})
    await api.create_payment({"userId": 1, "apartmentId": apartment["id"], "amount": 95000,
                              "concept": "Pago de administración", "dueDate": "2024-05-05"})

    assert await _run(client, "payments", "--search", "torre") == 0
    assert await _run(client, "payments") == 0

    out = capsys.readouterr().out
    assert "No hay pagos registrados este mes." in out
    assert "Torre C, Apto 101 · Administración - Pago de administración · PENDIENTE" in out


async def test_checkin_of_missing_guest_reports_banner(client, capsys):
    assert await _run(client, "checkin", "42") == 1

    assert "Recurso no encontrado" in capsys.readouterr().err


async def test_resource_error_prints_server_text(make_mock_client, capsys):
    client = make_mock_client(lambda request: httpx.Response(400, json={"error": "Torre inexistente"}))

    assert await _run(client, "apartments") == 1

    assert "Torre inexistente" in capsys.readouterr().err


async def test_expired_session_suggests_login(make_mock_client, capsys):
    client = make_mock_client(lambda request: httpx.Response(401))

    assert await _run(client, "users") == 1

    err = capsys.readouterr().err
    assert "Sesión expirada. Por favor, inicia sesión nuevamente" in err
    assert "conjunto login" in err


def test_unknown_role_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["users", "--role", "admin"])
