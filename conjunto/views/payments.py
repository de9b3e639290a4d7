# =====================================================================
# PANTALLA DE PAGOS DE ADMINISTRACIÓN
# =====================================================================

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Set

from conjunto.resources import ConjuntoApi
from conjunto.schemas import PaymentCreate, PaymentStatus
from .base import Page, contains, nested

STATUS_LABELS: Dict[PaymentStatus, str] = {
    "paid": "AL DÍA",
    "pending": "PENDIENTE",
    "late": "MORA",
}

# Solo se puede registrar el pago de cuotas pendientes o en mora
PAYABLE_STATUSES: Set[PaymentStatus] = {"pending", "late"}


def status_label(status: Optional[str]) -> Optional[str]:
    return STATUS_LABELS.get(status, status)


def can_mark_as_paid(payment: Dict[str, Any]) -> bool:
    return payment.get("status") in PAYABLE_STATUSES


def apartment_label(payment: Dict[str, Any]) -> str:
    apartment = payment.get("apartment")
    if not apartment:
        return "Sin apartamento"
    return f"Torre {apartment.get('tower')}, Apto {apartment.get('number')}"


def matches_search(payment: Dict[str, Any], term: str) -> bool:
    return (
        contains(payment.get("concept"), term)
        or contains(nested(payment, "user", "name"), term)
        or contains(nested(payment, "user", "email"), term)
        or contains(nested(payment, "apartment", "number"), term)
        or contains(nested(payment, "apartment", "tower"), term)
    )


class PaymentsPage(Page):
    """Pagos del mes, con los usuarios y apartamentos para el formulario"""

    load_error = "Error al cargar pagos"

    def __init__(self, api: ConjuntoApi, month: Optional[str] = None):
        super().__init__(api)
        self.month = month
        self.users: List[Dict[str, Any]] = []
        self.apartments: List[Dict[str, Any]] = []

    async def fetch(self) -> Any:
        return await self.api.get_payments(self.month)

    async def mount(self) -> None:
        """Carga inicial: pagos, usuarios y apartamentos en paralelo"""
        await asyncio.gather(self.load(), self._load_users(), self._load_apartments())

    async def _load_users(self) -> None:
        self.users = await self._lookup(self.api.get_users, "usuarios")

    async def _load_apartments(self) -> None:
        self.apartments = await self._lookup(self.api.get_apartments, "apartamentos")

    def filtered(self, search: str = "") -> List[Dict[str, Any]]:
        return [p for p in self.items if matches_search(p, search)]

    async def create(self, **form: Any) -> bool:
        payload = PaymentCreate(**form).to_payload()
        return await self._mutate(lambda: self.api.create_payment(payload), "Error al crear pago")

    async def mark_as_paid(self, payment_id: Any) -> bool:
        return await self._mutate(
            lambda: self.api.register_payment_as_paid(payment_id), "Error al registrar pago"
        )
