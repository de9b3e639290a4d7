from .payments import PaymentsPage
from .users import UsersPage
from .maintenance import MaintenancePage
from .damage_reports import DamageReportsPage
from .airbnb import AirbnbPage

__all__ = ["PaymentsPage", "UsersPage", "MaintenancePage", "DamageReportsPage", "AirbnbPage"]
