# =====================================================================
# ESQUEMAS DE REPORTES DE DAÑOS
# =====================================================================

from __future__ import annotations

from typing import Optional

from .base import FormModel
from .enums import DamagePriority, DamageStatus, EntityId


class DamageReportCreate(FormModel):
    """
    Esquema para la creación de un reporte de daño.

    Attributes:
        title (str): Título corto del daño
        description (str): Descripción del problema
        priority (DamagePriority): Prioridad (default: 'low')
        apartment_id (str): Apartamento donde ocurre
    """
    title: str
    description: str
    priority: DamagePriority = "low"
    apartment_id: EntityId


class DamageReportUpdate(FormModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[DamagePriority] = None
    apartment_id: Optional[EntityId] = None
    status: Optional[DamageStatus] = None
