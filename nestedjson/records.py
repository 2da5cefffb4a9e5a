from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class Entry(BaseModel):
    """
    One top-level document entry, as returned by `NestedJSONStore.all()`:
      { "ID": "<key>", "data": <value> }
    """

    ID: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
