import logging

import httpx
import pytest

from conjunto.exceptions import ApiError, CONNECTION_ERROR_BODY, ResourceError
from conjunto.resources import ConjuntoApi


async def _seed_apartment(api, **overrides):
    data = {"tower": "A", "floor": 3, "number": "302", **overrides}
    return await api.create_apartment(data)


# =====================================================================
# RESPUESTAS CORRECTAS
# =====================================================================

async def test_create_then_list_includes_new_apartment(api):
    created = await _seed_apartment(api)

    apartments = await api.get_apartments()

    assert created["id"] in [a["id"] for a in apartments]
    assert apartments[-1]["number"] == "302"


async def test_same_read_twice_returns_identical_data(api):
    await _seed_apartment(api)
    await _seed_apartment(api, number="303")

    first = await api.get_apartments()
    second = await api.get_apartments()

    assert first == second


async def test_update_and_delete_apartment(api):
    created = await _seed_apartment(api)

    updated = await api.update_apartment(created["id"], {"number": "401"})
    deleted = await api.delete_apartment(created["id"])

    assert updated["number"] == "401"
    # La eliminación devuelve el cuerpo completo, no solo `data`
    assert deleted == {"success": True, "message": "Eliminado"}
    assert await api.get_apartments() == []


async def test_payments_month_filter_and_pay(api, backend):
    apartment = await _seed_apartment(api)
    may = await api.create_payment(
        {"userId": 1, "apartmentId": apartment["id"], "amount": 250000, "dueDate": "2024-05-10"}
    )
    await api.create_payment(
        {"userId": 1, "apartmentId": apartment["id"], "amount": 250000, "dueDate": "2024-06-10"}
    )

    payments = await api.get_payments("2024-05")
    paid = await api.register_payment_as_paid(may["id"])

    assert [p["id"] for p in payments] == [may["id"]]
    assert payments[0]["user"]["name"] == "Administración"
    assert backend.state.requests[-2]["query"] == "month=2024-05"
    assert paid["status"] == "paid"


async def test_get_payments_without_month_sends_no_query(api, backend):
    await api.get_payments()

    assert backend.state.requests[-1]["path"] == "/api/payments"
    assert backend.state.requests[-1]["query"] == ""


async def test_damage_reports_are_read_from_my_reports(api, backend):
    apartment = await _seed_apartment(api)
    await api.create_damage_report({"title": "Gotera", "description": "Baño", "apartmentId": apartment["id"]})

    reports = await api.get_damage_reports()

    assert backend.state.requests[-1]["path"] == "/api/damage-reports/my-reports"
    assert reports[0]["title"] == "Gotera"
    assert reports[0]["status"] == "pending"


async def test_airbnb_checkin_moves_guest_to_active(api):
    apartment = await _seed_apartment(api)
    guest = await api.create_airbnb_guest({
        "apartmentId": apartment["id"],
        "guestName": "Laura Gómez",
        "guestCedula": "52123456",
        "checkInDate": "2024-05-01",
        "checkOutDate": "2024-05-04",
    })
    assert await api.get_active_airbnb_guests() == []

    checked_in = await api.checkin_airbnb_guest(guest["id"])

    assert checked_in["status"] == "checked_in"
    assert [g["id"] for g in await api.get_active_airbnb_guests()] == [guest["id"]]


async def test_notifications_and_events_crud(api):
    note = await api.create_notification({"title": "Corte de agua", "message": "Martes 8am"})
    event = await api.create_event({"title": "Asamblea", "scheduledDate": "2024-06-01", "type": "reunión"})

    await api.update_notification(note["id"], {"message": "Miércoles 8am"})
    await api.update_event(event["id"], {"area": "Salón social"})

    assert (await api.get_notifications())[0]["message"] == "Miércoles 8am"
    assert (await api.get_events())[0]["area"] == "Salón social"

    await api.delete_notification(note["id"])
    await api.delete_event(event["id"])
    assert await api.get_notifications() == []
    assert await api.get_events() == []


async def test_checkin_sends_no_body(make_mock_client):
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["content"] = request.content
        return httpx.Response(200, json={"data": {"id": 7, "status": "checked_in"}})

    api = ConjuntoApi(make_mock_client(handler))
    await api.checkin_airbnb_guest(7)

    assert seen == {"method": "PUT", "content": b""}


async def test_register_payment_sends_empty_object(make_mock_client):
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["content"] = request.content
        return httpx.Response(200, json={"data": {"id": 3, "status": "paid"}})

    api = ConjuntoApi(make_mock_client(handler))
    await api.register_payment_as_paid(3)

    assert seen == {"path": "/api/payments/3/pay", "content": b"{}"}


# =====================================================================
# ERRORES: SEGUNDA CAPA (FUNCIÓN DE RECURSO)
# =====================================================================

async def test_server_error_body_takes_precedence(api):
    with pytest.raises(ResourceError) as exc_info:
        await api.create_apartment({"tower": "A"})

    error = exc_info.value
    assert error.body == {"error": "Campos requeridos: floor, number"}
    assert error.error == "Campos requeridos: floor, number"
    # Quien lo captura no ve el mensaje del interceptor
    assert error.user_message is None
    assert isinstance(error.__cause__, ApiError)
    assert error.__cause__.user_message == "Campos requeridos: floor, number"


async def test_network_failure_raises_connection_body(make_mock_client):
    def handler(request):
        raise httpx.ConnectError("sin red", request=request)

    api = ConjuntoApi(make_mock_client(handler))

    with pytest.raises(ResourceError) as exc_info:
        await api.get_users()

    assert exc_info.value.body == CONNECTION_ERROR_BODY
    assert exc_info.value.__cause__.user_message == "Error de conexión. Verifica tu conexión a internet"


async def test_empty_error_body_raises_connection_body(make_mock_client):
    api = ConjuntoApi(make_mock_client(lambda request: httpx.Response(500)))

    with pytest.raises(ResourceError) as exc_info:
        await api.get_payments()

    assert exc_info.value.body == {"error": "Error de conexión"}
    assert exc_info.value.__cause__.status_code == 500


async def test_failure_logs_resource_diagnostic(make_mock_client, caplog):
    api = ConjuntoApi(make_mock_client(lambda request: httpx.Response(403, json={"error": "Prohibido"})))

    with caplog.at_level(logging.ERROR, logger="conjunto.resources"):
        with pytest.raises(ResourceError):
            await api.delete_damage_report(5)

    assert "Error al eliminar reporte de daño" in caplog.text
    assert "Prohibido" in caplog.text


async def test_unauthorized_still_expires_session(make_mock_client, storage, navigator):
    storage.set_item("token", "vencido")
    api = ConjuntoApi(make_mock_client(lambda request: httpx.Response(401, json={"error": "Token vencido"})))

    with pytest.raises(ResourceError) as exc_info:
        await api.get_airbnb_guests()

    assert exc_info.value.body == {"error": "Token vencido"}
    assert storage.get_item("token") is None
    assert navigator.history == ["/login"]


# =====================================================================
# RESPUESTAS CORRECTAS SIN OBJETO JSON
# =====================================================================

async def test_html_body_returns_no_data(make_mock_client):
    api = ConjuntoApi(make_mock_client(lambda request: httpx.Response(200, text="<html></html>")))

    assert await api.get_payments() is None
    assert await api.delete_payment(1) == "<html></html>"


async def test_bare_list_body_returns_no_data(make_mock_client):
    api = ConjuntoApi(make_mock_client(lambda request: httpx.Response(200, json=[{"id": 1}])))

    assert await api.get_apartments() is None
