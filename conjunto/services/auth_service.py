"""
Servicio de sesión: inicio y cierre de sesión sobre el almacenamiento local
"""
import logging
from typing import Any, Dict, Optional

from conjunto.resources import ConjuntoApi
from conjunto.schemas import LoginRequest
from conjunto.storage import TOKEN_KEY, USER_KEY, MemoryStorage

logger = logging.getLogger(__name__)


class AuthService:
    """Guarda y limpia las claves `token` y `user` del almacenamiento"""

    def __init__(self, api: ConjuntoApi, storage: Optional[MemoryStorage] = None):
        self.api = api
        self.storage = storage if storage is not None else api.client.storage

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Inicia sesión y persiste el token y el perfil devueltos por el backend.

        Lanza ValidationError si falta el correo o la contraseña, y ResourceError
        si el backend rechaza las credenciales.
        """
        credentials = LoginRequest(email=email, password=password)
        data = await self.api.login(credentials.email, credentials.password) or {}

        token = data.get("token")
        user = data.get("user")
        if token:
            self.storage.set_item(TOKEN_KEY, token)
        if user is not None:
            self.storage.set_item(USER_KEY, user)

        logger.info("Sesión iniciada", extra={"email": credentials.email})
        return data

    def logout(self) -> None:
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)

    def current_user(self) -> Optional[Dict[str, Any]]:
        return self.storage.get_item(USER_KEY)

    def is_authenticated(self) -> bool:
        return bool(self.storage.get_item(TOKEN_KEY))
