# =====================================================================
# ESQUEMAS DEL CLIENTE
# =====================================================================

from .enums import (
    EntityId, UserRole, PaymentStatus, DamagePriority, DamageStatus, GuestStatus, EventCategory
)
from .base import FormModel
from .auth import LoginRequest
from .payment import PaymentCreate, DEFAULT_CONCEPT
from .user import UserCreate
from .maintenance import MaintenanceEventCreate, DEFAULT_EVENT_TYPE
from .damage_report import DamageReportCreate, DamageReportUpdate
from .airbnb import AirbnbGuestCreate

__all__ = [
    "EntityId", "UserRole", "PaymentStatus", "DamagePriority", "DamageStatus", "GuestStatus", "EventCategory",
    "FormModel", "LoginRequest", "PaymentCreate", "DEFAULT_CONCEPT",
    "UserCreate", "MaintenanceEventCreate", "DEFAULT_EVENT_TYPE",
    "DamageReportCreate", "DamageReportUpdate", "AirbnbGuestCreate",
]
