from __future__ import annotations

from typing import Any, Optional

import httpx

# =====================================================================
# MENSAJES PARA EL USUARIO
# =====================================================================

DEFAULT_MESSAGE = "Ha ocurrido un error inesperado"
INVALID_DATA_MESSAGE = "Datos inválidos"
SESSION_EXPIRED_MESSAGE = "Sesión expirada. Por favor, inicia sesión nuevamente"
FORBIDDEN_MESSAGE = "No tienes permisos para realizar esta acción"
NOT_FOUND_MESSAGE = "Recurso no encontrado"
INVALID_INPUT_MESSAGE = "Datos de entrada inválidos"
SERVER_ERROR_MESSAGE = "Error interno del servidor. Inténtalo más tarde"
TIMEOUT_MESSAGE = "La solicitud ha tardado demasiado. Verifica tu conexión"
CONNECTION_MESSAGE = "Error de conexión. Verifica tu conexión a internet"

CONNECTION_ERROR_BODY = {"error": "Error de conexión"}


def response_data(response: Optional[httpx.Response]) -> Any:
    """Cuerpo de la respuesta ya decodificado: JSON si se puede, texto si no."""
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text or None


def payload_data(response: Optional[httpx.Response]) -> Any:
    """Contenido de `data` en una respuesta correcta; None si el cuerpo no es un objeto JSON."""
    body = response_data(response)
    if isinstance(body, dict):
        return body.get("data")
    return None


def server_error_text(data: Any) -> Optional[str]:
    """Texto de error que envía el servidor en el campo `error`, si existe."""
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    return None


# =====================================================================
# EXCEPCIONES
# =====================================================================

class ConjuntoError(Exception):
    """Base de los errores que el cliente propaga a las pantallas."""

    user_message: Optional[str] = None


class ApiError(ConjuntoError):
    """
    Error de red o HTTP enriquecido por el interceptor de respuestas.

    Attributes:
        user_message (str): Mensaje listo para mostrar al usuario
        original_error (Exception): Error original de httpx
        response (Optional[httpx.Response]): Respuesta del servidor, si la hubo
        request (Optional[httpx.Request]): Petición que falló
    """

    def __init__(
        self,
        user_message: str,
        original_error: Exception,
        response: Optional[httpx.Response] = None,
        request: Optional[httpx.Request] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.original_error = original_error
        self.response = response
        self.request = request

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def data(self) -> Any:
        return response_data(self.response)


class ResourceError(ConjuntoError):
    """
    Error que lanzan las funciones de recurso.

    `body` es el cuerpo de error del servidor si llegó alguno, o
    CONNECTION_ERROR_BODY si no. No lleva `user_message`: quien lo captura
    decide el texto a mostrar.
    """

    def __init__(self, body: Any):
        self.body = body
        super().__init__(self.error)

    @property
    def error(self) -> Any:
        if isinstance(self.body, dict):
            return self.body.get("error")
        return self.body
