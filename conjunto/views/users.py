# =====================================================================
# PANTALLA DE RESIDENTES
# =====================================================================

from __future__ import annotations

from typing import Any, Dict, List

from conjunto.exceptions import payload_data
from conjunto.schemas import UserCreate
from .base import Page, contains

ROLE_LABELS = {
    "owner": "Dueño",
    "tenant": "Arrendatario",
    "airbnb_guest": "Airbnb",
}

# Filtros de la barra superior: clave -> etiqueta
RESIDENT_TYPES = {"all": "Todos", **ROLE_LABELS}


def role_label(role: str) -> str:
    return ROLE_LABELS.get(role, role)


class UsersPage(Page):
    """Residentes del conjunto; usa el cliente HTTP directamente"""

    load_error = "Error al cargar usuarios"

    async def fetch(self) -> Any:
        response = await self.api.client.get("/users")
        return payload_data(response)

    async def mount(self) -> None:
        await self.load()

    def filtered(self, role: str = "all", search: str = "") -> List[Dict[str, Any]]:
        term = search.strip()
        return [
            user for user in self.items
            if (role == "all" or user.get("role") == role)
            and contains(user.get("name") or "", term)
        ]

    async def create(self, **form: Any) -> bool:
        payload = UserCreate(**form).to_payload()
        return await self._mutate(
            lambda: self.api.client.post("/users", json=payload), "Error al crear usuario"
        )
