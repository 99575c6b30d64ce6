from __future__ import annotations

"""Result contracts shared by the classification models.

These models describe trained classifiers in a JSON-friendly shape (lists,
dicts, scalars) so they can be logged or persisted without numpy.

Note: contracts should only depend on stdlib + pydantic.
"""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict

# Labels are allowed to be numbers or strings.
Label = Union[int, float, str]


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


def as_json_list(v: Any) -> List[Any]:
    """Best-effort cast of an array-like to nested Python lists."""
    if v is None:
        return []
    if hasattr(v, "tolist"):
        return v.tolist()
    return list(v)
