from __future__ import annotations

import math
from typing import Any, Literal, Union

JsonValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]
JsonKind = Literal["object", "array", "string", "number", "boolean", "null"]


def kind_of(value: Any) -> JsonKind:
    """
    Classify a decoded JSON value into one of the six JSON kinds.

    `bool` is checked before `int` since it subclasses it; JSON `true` is not a number.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_object(value: Any) -> bool:
    return kind_of(value) == "object"


def is_array(value: Any) -> bool:
    return kind_of(value) == "array"


def is_number(value: Any) -> bool:
    """True for finite ints and floats; NaN and infinities have no JSON form."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def json_equal(left: Any, right: Any) -> bool:
    """
    Structural JSON equality that keeps booleans apart from numbers at every depth
    (Python treats True == 1 and [1] == [True]).
    """
    kind = kind_of(left)
    if kind != kind_of(right):
        return False
    if kind == "array":
        return len(left) == len(right) and all(json_equal(a, b) for a, b in zip(left, right))
    if kind == "object":
        return left.keys() == right.keys() and all(json_equal(v, right[k]) for k, v in left.items())
    return left == right
