"""
Almacenamiento persistente del lado del cliente (equivalente a localStorage).
Solo se guardan dos claves: `token` y `user`.
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

TOKEN_KEY = "token"
USER_KEY = "user"


class MemoryStorage:
    """Almacenamiento en memoria, útil para pruebas y sesiones efímeras"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get_item(self, key: str) -> Any:
        return self._data.get(key)

    def set_item(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class LocalStorage(MemoryStorage):
    """Almacenamiento en un archivo JSON; cada escritura se vuelca a disco"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(self._read())

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError:
                # Archivo corrupto: se trata como sesión vacía
                return {}
        return data if isinstance(data, dict) else {}

    def _write(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(self._data, fh, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def set_item(self, key: str, value: Any) -> None:
        super().set_item(key, value)
        self._write()

    def remove_item(self, key: str) -> None:
        super().remove_item(key)
        self._write()

    def clear(self) -> None:
        super().clear()
        self._write()
