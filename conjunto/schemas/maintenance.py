# =====================================================================
# ESQUEMAS DE MANTENIMIENTOS Y EVENTOS
# =====================================================================

from __future__ import annotations

from datetime import date
from typing import Optional

from .base import FormModel

DEFAULT_EVENT_TYPE = "mantenimiento"


class MaintenanceEventCreate(FormModel):
    """
    Esquema para registrar un mantenimiento o evento del conjunto.

    Attributes:
        title (str): Título del evento
        description (Optional[str]): Descripción
        area (Optional[str]): Zona común afectada
        scheduled_date (date): Fecha programada
        type (str): Tipo libre (mantenimiento, fiesta, reunión...)
    """
    title: str
    description: Optional[str] = None
    area: Optional[str] = None
    scheduled_date: date
    type: str = DEFAULT_EVENT_TYPE
