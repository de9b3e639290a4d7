# =====================================================================
# ESQUEMAS DE HUÉSPEDES AIRBNB
# =====================================================================

from __future__ import annotations

from datetime import date

from pydantic import Field

from .base import FormModel
from .enums import EntityId


class AirbnbGuestCreate(FormModel):
    """
    Esquema para registrar (o editar) un huésped Airbnb.

    Attributes:
        apartment_id (str): Apartamento que ocupa
        guest_name (str): Nombre del huésped principal
        guest_cedula (str): Documento del huésped principal
        number_of_guests (int): Número de huéspedes (default: 1, mínimo: 1)
        check_in_date (date): Fecha de llegada
        check_out_date (date): Fecha de salida
    """
    apartment_id: EntityId
    guest_name: str
    guest_cedula: str
    number_of_guests: int = Field(1, ge=1)
    check_in_date: date
    check_out_date: date
