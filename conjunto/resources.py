# =====================================================================
# FUNCIONES DE RECURSO - UNA POR OPERACIÓN DEL BACKEND
# =====================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from conjunto.api_client import ApiClient, get_api_client
from conjunto.exceptions import ApiError, CONNECTION_ERROR_BODY, ResourceError, payload_data, response_data

logger = logging.getLogger(__name__)


class ConjuntoApi:
    """
    Funciones de conveniencia sobre ApiClient.

    Cada método hace una única llamada HTTP. Si falla, registra un diagnóstico
    propio del recurso y lanza ResourceError con el cuerpo de error del servidor
    (o CONNECTION_ERROR_BODY si no hubo respuesta). El ApiError del interceptor
    queda encadenado como `__cause__`.
    """

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_api_client()

    async def _call(
        self,
        method: str,
        path: str,
        diagnostic: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        unwrap: bool = True,
    ) -> Any:
        try:
            res = await self.client.request(method, path, json=json, params=params)
        except ApiError as err:
            data = err.data
            logger.error("Error al %s: %s", diagnostic, data or str(err.original_error))
            raise ResourceError(data or dict(CONNECTION_ERROR_BODY)) from err

        return payload_data(res) if unwrap else response_data(res)

    # =========================================================
    # AUTENTICACIÓN
    # =========================================================

    async def login(self, email: str, password: str) -> Any:
        return await self._call("POST", "/auth/login", "iniciar sesión",
                                json={"email": email, "password": password})

    # =========================================================
    # APARTAMENTOS
    # =========================================================

    async def get_apartments(self) -> Any:
        return await self._call("GET", "/apartments", "obtener apartamentos")

    async def create_apartment(self, apartment_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/apartments", "crear apartamento", json=apartment_data)

    async def update_apartment(self, apartment_id: Any, apartment_data: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/apartments/{apartment_id}", "actualizar apartamento",
                                json=apartment_data)

    async def delete_apartment(self, apartment_id: Any) -> Any:
        return await self._call("DELETE", f"/apartments/{apartment_id}", "eliminar apartamento",
                                unwrap=False)

    # =========================================================
    # PAGOS DE ADMINISTRACIÓN
    # =========================================================

    async def create_payment(self, payment_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/payments", "crear pago", json=payment_data)

    async def get_payments(self, month: Optional[str] = None) -> Any:
        params = {"month": month} if month else None
        return await self._call("GET", "/payments", "obtener pagos", params=params)

    async def register_payment_as_paid(self, payment_id: Any) -> Any:
        return await self._call("PUT", f"/payments/{payment_id}/pay", "registrar pago", json={})

    async def update_payment(self, payment_id: Any, payment_data: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/payments/{payment_id}", "actualizar pago", json=payment_data)

    async def delete_payment(self, payment_id: Any) -> Any:
        return await self._call("DELETE", f"/payments/{payment_id}", "eliminar pago", unwrap=False)

    # =========================================================
    # USUARIOS
    # =========================================================

    async def get_users(self) -> Any:
        return await self._call("GET", "/users", "obtener usuarios")

    async def create_user(self, user_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/users", "crear usuario", json=user_data)

    # =========================================================
    # MANTENIMIENTOS Y EVENTOS
    # =========================================================

    async def get_events(self) -> Any:
        return await self._call("GET", "/maintenance", "obtener eventos")

    async def create_event(self, payload: Dict[str, Any]) -> Any:
        return await self._call("POST", "/maintenance", "crear evento", json=payload)

    async def update_event(self, event_id: Any, payload: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/maintenance/{event_id}", "actualizar evento", json=payload)

    async def delete_event(self, event_id: Any) -> Any:
        return await self._call("DELETE", f"/maintenance/{event_id}", "eliminar evento", unwrap=False)

    # =========================================================
    # NOTIFICACIONES
    # =========================================================

    async def get_notifications(self) -> Any:
        return await self._call("GET", "/notifications", "obtener notificaciones")

    async def create_notification(self, notification_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/notifications", "crear notificación", json=notification_data)

    async def update_notification(self, notification_id: Any, notification_data: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/notifications/{notification_id}", "actualizar notificación",
                                json=notification_data)

    async def delete_notification(self, notification_id: Any) -> Any:
        return await self._call("DELETE", f"/notifications/{notification_id}", "eliminar notificación",
                                unwrap=False)

    # =========================================================
    # REPORTES DE DAÑOS
    # =========================================================

    async def get_damage_reports(self) -> Any:
        return await self._call("GET", "/damage-reports/my-reports", "obtener reportes de daños")

    async def create_damage_report(self, report_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/damage-reports", "crear reporte de daño", json=report_data)

    async def update_damage_report(self, report_id: Any, report_data: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/damage-reports/{report_id}", "actualizar reporte de daño",
                                json=report_data)

    async def delete_damage_report(self, report_id: Any) -> Any:
        return await self._call("DELETE", f"/damage-reports/{report_id}", "eliminar reporte de daño",
                                unwrap=False)

    # =========================================================
    # HUÉSPEDES AIRBNB
    # =========================================================

    async def get_airbnb_guests(self) -> Any:
        return await self._call("GET", "/airbnb/guests", "obtener huéspedes Airbnb")

    async def get_active_airbnb_guests(self) -> Any:
        return await self._call("GET", "/airbnb/guests/active", "obtener huéspedes activos")

    async def create_airbnb_guest(self, guest_data: Dict[str, Any]) -> Any:
        return await self._call("POST", "/airbnb/guests", "crear huésped Airbnb", json=guest_data)

    async def update_airbnb_guest(self, guest_id: Any, guest_data: Dict[str, Any]) -> Any:
        return await self._call("PUT", f"/airbnb/guests/{guest_id}", "actualizar huésped Airbnb",
                                json=guest_data)

    async def checkin_airbnb_guest(self, guest_id: Any) -> Any:
        return await self._call("PUT", f"/airbnb/guests/{guest_id}/checkin", "hacer check-in")

    async def delete_airbnb_guest(self, guest_id: Any) -> Any:
        return await self._call("DELETE", f"/airbnb/guests/{guest_id}", "eliminar huésped Airbnb",
                                unwrap=False)
