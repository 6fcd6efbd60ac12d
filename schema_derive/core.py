"""JSON Schemas for built-in Python types, and the hook used by derived classes."""

from __future__ import annotations

import copy
import types
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin

SCHEMA_HOOK = "__json_schema__"

_PRIMITIVES: dict[type, str] = {
    bool: "boolean",
    int: "number",
    float: "number",
    str: "string",
    type(None): "null",
}


class SchemaError(TypeError):
    """Raised when no JSON Schema can be produced for a type."""


@dataclass(frozen=True)
class _FixedLength:
    length: int


class Array:
    """Fixed-length array annotation: ``Array[int, 3]`` is a list of exactly three ints."""

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Array takes an item type and a length: Array[T, N]")
        item, length = params
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise TypeError(f"Array length must be a non-negative int, got {length!r}")
        return Annotated[list[item], _FixedLength(length)]


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def is_optional(tp: Any) -> bool:
    """Return True if ``tp`` is a union that admits ``None``, such as ``Optional[int]``."""
    if not _is_union(get_origin(tp)):
        return False
    return type(None) in get_args(tp)


def _union_schema(tp: Any) -> Any:
    members = [arg for arg in get_args(tp) if arg is not type(None)]
    if len(members) != 1:
        raise SchemaError(f"only optional types are supported among unions, got {tp!r}")
    return json_schema(members[0])


def _annotated_schema(tp: Any) -> Any:
    base, *metadata = get_args(tp)
    schema = json_schema(base)
    for extra in metadata:
        if isinstance(extra, _FixedLength) and isinstance(schema, dict):
            schema["maxItems"] = extra.length
            schema["minItems"] = extra.length
    return schema


def json_schema(tp: Any) -> Any:
    """Return the JSON Schema for the type ``tp``.

    Classes that define a ``__json_schema__`` classmethod supply their own schema.
    """
    if tp is None:
        tp = type(None)

    if isinstance(tp, type):
        hook = getattr(tp, SCHEMA_HOOK, None)
        if callable(hook):
            return copy.deepcopy(hook())
        if tp in _PRIMITIVES:
            return {"type": _PRIMITIVES[tp]}

    origin = get_origin(tp)
    if origin is Annotated:
        return _annotated_schema(tp)
    if origin is list:
        args = get_args(tp)
        if len(args) != 1:
            raise SchemaError(f"list type needs exactly one item type, got {tp!r}")
        return {"type": "array", "items": json_schema(args[0])}
    if _is_union(origin):
        return _union_schema(tp)

    raise SchemaError(f"no JSON schema for type {tp!r}")