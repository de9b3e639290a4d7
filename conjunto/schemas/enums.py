# =====================================================================
# ENUMERACIONES DEL SISTEMA
# =====================================================================

from __future__ import annotations

from typing import Literal, Union

"""
Estados y tipos que maneja el backend del conjunto.
Deben coincidir con los valores que devuelve la API.
"""

# Identificadores: el backend puede usar enteros o UUID
EntityId = Union[int, str]

# Roles de usuario
UserRole = Literal["owner", "tenant", "airbnb_guest", "security"]

# Estados de un pago de administración
PaymentStatus = Literal["pending", "paid", "late"]

# Prioridad de un reporte de daño
DamagePriority = Literal["low", "medium", "high"]

# Estados de un reporte de daño
DamageStatus = Literal["pending", "in_progress", "resolved"]

# Estados de un huésped Airbnb
GuestStatus = Literal["pending", "checked_in", "checked_out"]

# Clasificación de eventos de mantenimiento (calculada en el cliente)
EventCategory = Literal["maintenance", "party", "meeting", "other"]
