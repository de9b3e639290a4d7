# =====================================================================
# PANTALLA DE HUÉSPEDES AIRBNB
# =====================================================================

from __future__ import annotations

import asyncio
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from conjunto.exceptions import payload_data
from conjunto.schemas import AirbnbGuestCreate
from .base import Page, contains, contains_exact, as_list, find_by_id, nested


def parse_date(value: Any) -> Optional[date]:
    """Fecha local de un valor ISO 8601 ('2024-05-01' o '2024-05-01T15:00:00Z')"""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def matches(guest: Dict[str, Any], search: str = "", status: Optional[str] = None) -> bool:
    matches_search = (
        contains(guest.get("guestName"), search)
        or contains(guest.get("guestCedula"), search)
        or contains_exact(nested(guest, "apartment", "number"), search)
    )
    return bool(matches_search) and (not status or guest.get("status") == status)


def form_from_guest(guest: Dict[str, Any]) -> Dict[str, Any]:
    """Datos del formulario de edición; las fechas quedan como YYYY-MM-DD"""
    return {
        "apartment_id": guest.get("apartmentId") or "",
        "guest_name": guest.get("guestName"),
        "guest_cedula": guest.get("guestCedula"),
        "number_of_guests": guest.get("numberOfGuests"),
        "check_in_date": str(guest.get("checkInDate") or "").split("T")[0],
        "check_out_date": str(guest.get("checkOutDate") or "").split("T")[0],
    }


class AirbnbPage(Page):
    """
    Control de huéspedes Airbnb.

    `items` son todos los huéspedes y `active_guests` los que están alojados.
    Ambas listas se vuelven a leer después de cada cambio.
    """

    load_error = "Error al cargar huéspedes"

    def __init__(self, api):
        super().__init__(api)
        self.active_guests: List[Dict[str, Any]] = []
        self.apartments: List[Dict[str, Any]] = []

    async def fetch(self) -> Any:
        response = await self.api.client.get("/airbnb/guests")
        return [g for g in as_list(payload_data(response)) if g]

    async def _load_active(self) -> None:
        async def fetch():
            response = await self.api.client.get("/airbnb/guests/active")
            return payload_data(response)

        self.active_guests = await self._lookup(fetch, "huéspedes activos")

    async def _load_apartments(self) -> None:
        async def fetch():
            response = await self.api.client.get("/apartments")
            return payload_data(response)

        self.apartments = await self._lookup(fetch, "apartamentos")

    async def mount(self) -> None:
        await asyncio.gather(self.load(), self._load_active(), self._load_apartments())

    async def reload(self) -> None:
        await asyncio.gather(self.load(), self._load_active())

    def filtered(self, search: str = "", status: Optional[str] = None) -> List[Dict[str, Any]]:
        return [g for g in self.items if matches(g, search, status)]

    def apartment_label(self, guest: Dict[str, Any]) -> str:
        apartment = find_by_id(self.apartments, guest.get("apartmentId"))
        if not apartment:
            return "N/A"
        return f"Torre {apartment.get('tower')} - Apt {apartment.get('number')}"

    def stats(self, today: Optional[date] = None) -> Dict[str, int]:
        """Tarjetas de resumen de la pantalla"""
        today = today or date.today()
        return {
            "active": len(self.active_guests),
            "total": len(self.items),
            "pending_check_in": sum(1 for g in self.items if g.get("status") == "pending"),
            "check_ins_today": sum(1 for g in self.items if parse_date(g.get("checkInDate")) == today),
        }

    async def save(self, guest_id: Any = None, **form: Any) -> bool:
        """Registra el huésped, o lo actualiza si se indica `guest_id`"""
        payload = AirbnbGuestCreate(**form).to_payload()
        if guest_id is not None:
            action = lambda: self.api.client.put(f"/airbnb/guests/{guest_id}", json=payload)
        else:
            action = lambda: self.api.client.post("/airbnb/guests", json=payload)
        return await self._mutate(action, "Error al guardar huésped")

    async def check_in(self, guest_id: Any) -> bool:
        guest = find_by_id(self.items, guest_id)
        if guest is not None and guest.get("status") != "pending":
            self.error = "Solo se puede hacer check-in a huéspedes pendientes"
            return False
        return await self._mutate(
            lambda: self.api.client.put(f"/airbnb/guests/{guest_id}/checkin"),
            "Error al hacer check-in",
        )

    async def delete(self, guest_id: Any) -> bool:
        return await self._mutate(
            lambda: self.api.client.delete(f"/airbnb/guests/{guest_id}"),
            "Error al eliminar huésped",
        )
