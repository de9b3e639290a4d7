# =====================================================================
# PANTALLA DE REPORTES DE DAÑOS
# =====================================================================

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from conjunto.exceptions import payload_data
from conjunto.schemas import DamageReportCreate, DamageReportUpdate, DamageStatus
from .base import Page, contains, contains_exact, find_by_id, nested


def matches(report: Dict[str, Any], search: str = "", status: Optional[str] = None) -> bool:
    matches_search = (
        contains(report.get("title"), search)
        or contains(report.get("description"), search)
        or contains_exact(nested(report, "apartment", "number"), search)
    )
    return bool(matches_search) and (not status or report.get("status") == status)


class DamageReportsPage(Page):
    """Reportes de daños del usuario actual (`/damage-reports/my-reports`)"""

    load_error = "Error al cargar reportes de daños"

    def __init__(self, api):
        super().__init__(api)
        self.apartments: List[Dict[str, Any]] = []

    async def fetch(self) -> Any:
        response = await self.api.client.get("/damage-reports/my-reports")
        return payload_data(response)

    async def mount(self) -> None:
        await asyncio.gather(self.load(), self._load_apartments())

    async def _load_apartments(self) -> None:
        async def fetch():
            response = await self.api.client.get("/apartments")
            return payload_data(response)

        self.apartments = await self._lookup(fetch, "apartamentos")

    def filtered(self, search: str = "", status: Optional[str] = None) -> List[Dict[str, Any]]:
        return [r for r in self.items if matches(r, search, status)]

    def apartment_label(self, report: Dict[str, Any]) -> str:
        apartment = find_by_id(self.apartments, report.get("apartmentId"))
        if not apartment:
            return "N/A"
        return (
            f"Torre {apartment.get('tower')} - Apt. {apartment.get('number')} "
            f"- Piso {apartment.get('floor')} "
        )

    async def save(self, report_id: Any = None, **form: Any) -> bool:
        """Crea el reporte, o lo actualiza si se indica `report_id`"""
        payload = DamageReportCreate(**form).to_payload()
        if report_id is not None:
            action = lambda: self.api.client.put(f"/damage-reports/{report_id}", json=payload)
        else:
            action = lambda: self.api.client.post("/damage-reports", json=payload)
        return await self._mutate(action, "Error al guardar reporte de daño")

    async def delete(self, report_id: Any) -> bool:
        return await self._mutate(
            lambda: self.api.client.delete(f"/damage-reports/{report_id}"),
            "Error al eliminar reporte de daño",
        )

    async def change_status(self, report_id: Any, status: DamageStatus) -> bool:
        payload = DamageReportUpdate(status=status).to_payload(exclude_none=True)
        return await self._mutate(
            lambda: self.api.client.put(f"/damage-reports/{report_id}", json=payload),
            "Error al actualizar estado del reporte",
        )
