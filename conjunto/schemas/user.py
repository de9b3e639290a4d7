# =====================================================================
# ESQUEMAS DE USUARIOS / RESIDENTES
# =====================================================================

from __future__ import annotations

from typing import Optional

from .base import FormModel
from .enums import UserRole


class UserCreate(FormModel):
    """
    Esquema para la creación de un residente.

    Attributes:
        name (str): Nombre completo
        email (str): Correo electrónico
        cedula (str): Documento de identidad
        phone (Optional[str]): Teléfono de contacto
        password (str): Contraseña inicial
        role (UserRole): Rol en el conjunto (default: 'tenant')
    """
    name: str
    email: str
    cedula: str
    phone: Optional[str] = None
    password: str
    role: UserRole = "tenant"
