# conjunto/navigation.py
import logging
from typing import List

logger = logging.getLogger(__name__)


class Navigator:
    """
    Vista actual del cliente y redirecciones.

    El interceptor de respuestas lo usa para mandar al usuario al login cuando
    la sesión expira. `history` guarda cada redirección realizada.
    """

    def __init__(self, current_path: str = "/"):
        self.current_path = current_path
        self.history: List[str] = []

    def redirect(self, path: str) -> None:
        logger.warning("Redirigiendo a %s desde %s", path, self.current_path)
        self.history.append(path)
        self.current_path = path
