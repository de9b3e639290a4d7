# =====================================================================
# ESQUEMAS DE AUTENTICACIÓN
# =====================================================================

from __future__ import annotations

from .base import FormModel


class LoginRequest(FormModel):
    """
    Esquema para la solicitud de inicio de sesión.

    Attributes:
        email (str): Correo del usuario
        password (str): Contraseña en texto plano
    """
    email: str
    password: str
