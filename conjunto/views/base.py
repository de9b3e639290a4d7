# =====================================================================
# BASE DE LOS CONTROLADORES DE PANTALLA
# =====================================================================

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from conjunto.exceptions import ConjuntoError
from conjunto.resources import ConjuntoApi

logger = logging.getLogger(__name__)


def contains(value: Any, term: str) -> bool:
    """Búsqueda por subcadena sin distinguir mayúsculas; False si el campo no existe"""
    if value is None:
        return False
    return term.lower() in str(value).lower()


def contains_exact(value: Any, term: str) -> bool:
    """Búsqueda por subcadena distinguiendo mayúsculas (números de apartamento)"""
    if value is None:
        return False
    return term in str(value)


def nested(record: Dict[str, Any], *path: str) -> Any:
    """Lee `record[a][b]...` devolviendo None si falta algún nivel"""
    value: Any = record
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def find_by_id(records: List[Dict[str, Any]], record_id: Any) -> Optional[Dict[str, Any]]:
    return next((r for r in records if r.get("id") == record_id), None)


def as_list(data: Any) -> List[Any]:
    """Solo una lista JSON cuenta como lista; cualquier otro contenido queda vacío"""
    return list(data) if isinstance(data, list) else []


class Page:
    """
    Estado común de una pantalla: lista principal, banner de error y carga.

    Cada pantalla define `fetch()` (la lectura principal) y `load_error`
    (mensaje por defecto si el error no trae `user_message`).
    """

    load_error = "Error al cargar datos"

    def __init__(self, api: ConjuntoApi):
        self.api = api
        self.items: List[Dict[str, Any]] = []
        self.error: Optional[str] = None
        self.loading = False

    async def fetch(self) -> Any:
        raise NotImplementedError

    async def load(self) -> None:
        """Lee la lista desde el backend; si falla deja la lista vacía y el banner"""
        self.loading = True
        self.error = None
        try:
            self.items = as_list(await self.fetch())
        except ConjuntoError as exc:
            logger.error("%s: %s", self.load_error, exc)
            self.error = exc.user_message or self.load_error
            self.items = []
        finally:
            self.loading = False

    async def retry(self) -> None:
        """Acción 'Reintentar' del banner: repite la misma lectura"""
        await self.load()

    async def _lookup(self, fetch: Callable[[], Awaitable[Any]], what: str) -> List[Dict[str, Any]]:
        """Listas auxiliares (apartamentos, usuarios): si fallan quedan vacías"""
        try:
            return as_list(await fetch())
        except ConjuntoError as exc:
            logger.error("Error al cargar %s: %s", what, exc)
            return []

    async def _mutate(self, action: Callable[[], Awaitable[Any]], error_message: str) -> bool:
        """Ejecuta una escritura y vuelve a leer la lista desde el backend"""
        try:
            await action()
        except ConjuntoError as exc:
            logger.error("%s: %s", error_message, exc)
            self.error = exc.user_message or error_message
            return False
        await self.reload()
        return True

    async def reload(self) -> None:
        await self.load()
