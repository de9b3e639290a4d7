# =====================================================================
# CLIENTE HTTP DE LA API - INTERCEPTORES Y NORMALIZACIÓN DE ERRORES
# =====================================================================

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

import httpx

from conjunto.config import settings
from conjunto.exceptions import (
    ApiError,
    CONNECTION_MESSAGE,
    DEFAULT_MESSAGE,
    FORBIDDEN_MESSAGE,
    INVALID_DATA_MESSAGE,
    INVALID_INPUT_MESSAGE,
    NOT_FOUND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    SESSION_EXPIRED_MESSAGE,
    TIMEOUT_MESSAGE,
    response_data,
    server_error_text,
)
from conjunto.navigation import Navigator
from conjunto.storage import TOKEN_KEY, USER_KEY, LocalStorage, MemoryStorage

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Punto único de salida HTTP hacia el backend.

    - Interceptor de petición: añade `Authorization: Bearer <token>` si hay token.
    - Interceptor de respuesta: convierte cualquier fallo en ApiError con un
      `user_message` listo para mostrar. En 401 limpia la sesión y redirige al login.

    Args:
        base_url: URL base del backend (por defecto `settings.api_url`)
        storage: Almacenamiento de donde se lee el token
        navigator: Vista actual y callback de redirección
        timeout: Tiempo máximo por petición en segundos
        transport: Transporte httpx alternativo (ASGI, mocks)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        storage: Optional[MemoryStorage] = None,
        navigator: Optional[Navigator] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.api_url
        self.storage = storage if storage is not None else MemoryStorage()
        self.navigator = navigator or Navigator()
        self.login_path = settings.login_path
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else settings.api_timeout,
            transport=transport,
            follow_redirects=True,
            event_hooks={
                "request": [self._request_interceptor],
                "response": [self._response_interceptor],
            },
        )

    # =========================================================
    # INTERCEPTORES
    # =========================================================

    async def _request_interceptor(self, request: httpx.Request) -> None:
        token = self.storage.get_item(TOKEN_KEY)
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _response_interceptor(self, response: httpx.Response) -> None:
        if response.is_error:
            # Leer el cuerpo antes de que httpx cierre la respuesta
            await response.aread()
            response.raise_for_status()

    def _status_message(self, response: httpx.Response) -> str:
        status = response.status_code
        data = response_data(response)

        if status == 400:
            return server_error_text(data) or INVALID_DATA_MESSAGE
        if status == 401:
            self._expire_session()
            return SESSION_EXPIRED_MESSAGE
        if status == 403:
            return FORBIDDEN_MESSAGE
        if status == 404:
            return NOT_FOUND_MESSAGE
        if status == 422:
            return server_error_text(data) or INVALID_INPUT_MESSAGE
        if status == 500:
            return SERVER_ERROR_MESSAGE
        return server_error_text(data) or f"Error {status}"

    def _expire_session(self) -> None:
        logger.warning("Sesión expirada: se eliminan token y usuario del almacenamiento")
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)
        if self.navigator.current_path != self.login_path:
            self.navigator.redirect(self.login_path)

    def _enhance(self, error: Exception) -> ApiError:
        """Construye el ApiError con el mensaje para el usuario"""
        if isinstance(error, httpx.HTTPStatusError):
            return ApiError(
                self._status_message(error.response),
                original_error=error,
                response=error.response,
                request=error.request,
            )

        if isinstance(error, httpx.TimeoutException):
            message = TIMEOUT_MESSAGE
        elif isinstance(error, httpx.RequestError):
            message = CONNECTION_MESSAGE
        else:
            message = DEFAULT_MESSAGE

        try:
            request = error.request
        except (AttributeError, RuntimeError):
            request = None
        return ApiError(message, original_error=error, request=request)

    # =========================================================
    # PETICIONES
    # =========================================================

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as err:
            raise self._enhance(err) from err

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


@lru_cache
def get_api_client() -> ApiClient:
    """Cliente compartido por todo el proceso, configurado desde `settings`"""
    return ApiClient(storage=LocalStorage(settings.storage_path))
