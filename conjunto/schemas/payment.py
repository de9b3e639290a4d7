# =====================================================================
# ESQUEMAS DE PAGOS DE ADMINISTRACIÓN
# =====================================================================

from __future__ import annotations

from datetime import date
from .base import FormModel
from .enums import EntityId

DEFAULT_CONCEPT = "Pago de administración"


class PaymentCreate(FormModel):
    """
    Esquema para registrar un cobro de administración.

    Attributes:
        user_id (str): Residente al que se le cobra
        apartment_id (str): Apartamento asociado
        amount (float): Valor a pagar
        concept (str): Concepto (default: 'Pago de administración')
        due_date (date): Fecha de vencimiento
    """
    user_id: EntityId
    apartment_id: EntityId
    amount: float
    concept: str = DEFAULT_CONCEPT
    due_date: date

