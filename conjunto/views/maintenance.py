# =====================================================================
# PANTALLA DE MANTENIMIENTOS Y EVENTOS
# =====================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from conjunto.exceptions import payload_data
from conjunto.schemas import EventCategory, MaintenanceEventCreate
from .base import Page, contains

# Orden de evaluación: el primer fragmento que aparezca en el tipo gana
EVENT_KEYWORDS = (
    ("manten", "maintenance"),
    ("fiesta", "party"),
    ("reuni", "meeting"),
)


def classify_event_type(event_type: Optional[str]) -> EventCategory:
    """Clasifica el tipo libre de un evento por subcadena"""
    if event_type:
        lowered = event_type.lower()
        for keyword, category in EVENT_KEYWORDS:
            if keyword in lowered:
                return category
    return "other"


def type_label(event_type: Optional[str]) -> str:
    return event_type.upper() if event_type else "MANTENIMIENTO"


def matches_search(event: Dict[str, Any], term: str) -> bool:
    return (
        contains(event.get("title"), term)
        or contains(event.get("description"), term)
        or contains(event.get("area"), term)
    )


class MaintenancePage(Page):
    load_error = "Error al cargar eventos"

    async def fetch(self) -> Any:
        response = await self.api.client.get("/maintenance")
        return payload_data(response)

    async def mount(self) -> None:
        await self.load()

    def filtered(self, search: str = "") -> List[Dict[str, Any]]:
        return [e for e in self.items if matches_search(e, search)]

    async def create(self, **form: Any) -> bool:
        payload = MaintenanceEventCreate(**form).to_payload()
        return await self._mutate(
            lambda: self.api.client.post("/maintenance", json=payload), "Error al crear evento"
        )
