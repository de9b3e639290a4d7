from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FormModel(BaseModel):
    """
    Base de los formularios: campos snake_case en Python, camelCase en la API.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self, exclude_none: bool = False) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
