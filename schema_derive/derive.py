"""Derive JSON Schemas for dataclasses, named tuples, enums and variant containers."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Callable

from .attributes import apply_attributes, field_options, schema_attributes
from .core import SCHEMA_HOOK, SchemaError, is_optional, json_schema

_ATTRIBUTES = "__schema_attributes__"


class _ProbeEnum(enum.Enum):
    pass


_DEFAULT_ENUM_DOCS = {"An enumeration.", _ProbeEnum.__doc__, enum.Enum.__doc__}


class _Kind(enum.Enum):
    STRUCT = "struct"
    TUPLE = "tuple"
    UNIT = "unit"
    ENUM = "enum"


def _is_namedtuple(cls: Any) -> bool:
    return isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields")


def _is_dataclass_type(cls: Any) -> bool:
    return isinstance(cls, type) and dataclasses.is_dataclass(cls)


def _is_generated_dataclass_doc(cls: type, doc: str) -> bool:
    """True when ``doc`` looks like the signature text a dataclass writes for itself."""
    if "\n" in doc or not doc.startswith(f"{cls.__name__}(") or not doc.endswith(")"):
        return False
    return all(fld.name in doc for fld in dataclasses.fields(cls) if fld.init)


def _own_doc(cls: type) -> str | None:
    """Return the docstring written for ``cls``, ignoring ones generated by the runtime."""
    doc = cls.__dict__.get("__doc__")
    if not doc:
        return None
    if issubclass(cls, enum.Enum) and doc in _DEFAULT_ENUM_DOCS:
        return None
    if _is_namedtuple(cls) and doc == f"{cls.__name__}({', '.join(cls._fields)})":
        return None
    if _is_dataclass_type(cls) and _is_generated_dataclass_doc(cls, doc):
        return None
    return doc


def _class_attributes(cls: type) -> dict[str, Any]:
    stored = cls.__dict__.get(_ATTRIBUTES)
    if isinstance(stored, dict):
        return dict(stored)
    return schema_attributes(_own_doc(cls), None)


def _type_hints(cls: type) -> dict[str, Any]:
    """Collect the class annotations along the MRO, nearest class last."""
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        annotations = getattr(klass, "__annotations__", None)
        if isinstance(annotations, dict):
            hints.update(annotations)
    return hints


def _nested_classes(cls: type) -> list[type]:
    prefix = f"{cls.__qualname__}."
    return [
        value
        for value in vars(cls).values()
        if isinstance(value, type) and value.__qualname__ == prefix + value.__name__
    ]


def _variants(cls: type) -> list[tuple[str, type | None]]:
    """Return ``(name, variant class)`` pairs; the class is None for enum members."""
    if issubclass(cls, enum.Enum):
        return [(member.name, None) for member in cls]
    return [(variant.__name__, variant) for variant in _nested_classes(cls)]


def _is_unit_variant(variant: type | None) -> bool:
    return variant is None or not (_is_dataclass_type(variant) or _is_namedtuple(variant))


def _kind(cls: type) -> _Kind:
    if issubclass(cls, enum.Enum):
        return _Kind.ENUM
    if dataclasses.is_dataclass(cls):
        return _Kind.STRUCT
    if _is_namedtuple(cls):
        return _Kind.TUPLE
    if _nested_classes(cls):
        return _Kind.ENUM
    if getattr(cls, "__annotations__", None):
        raise SchemaError(
            f"{cls.__name__} has annotated fields but is not a dataclass or named tuple"
        )
    return _Kind.UNIT


def field_properties(cls: type) -> tuple[list[str], dict[str, Any]]:
    """Return the required names and the property schemas of a dataclass."""
    if not _is_dataclass_type(cls):
        raise SchemaError(f"{cls!r} is not a dataclass")
    hints = _type_hints(cls)
    required: list[str] = []
    properties: dict[str, Any] = {}
    for fld in dataclasses.fields(cls):
        options = field_options(fld)
        if options.skip:
            continue
        tp = hints.get(fld.name, fld.type)
        schema = apply_attributes(json_schema(tp), options.attributes)
        if options.flatten:
            if isinstance(schema, dict):
                inner_required = schema.get("required")
                if isinstance(inner_required, list):
                    required.extend(inner_required)
                inner_properties = schema.get("properties")
                if isinstance(inner_properties, dict):
                    properties.update(inner_properties)
            continue
        name = options.rename if options.rename is not None else fld.name
        properties[name] = schema
        if not is_optional(tp):
            required.append(name)
    return required, properties


def struct_schema(cls: type) -> dict[str, Any]:
    """Object schema for a dataclass."""
    required, properties = field_properties(cls)
    return {
        "type": "object",
        "required": required,
        "properties": properties,
        **_class_attributes(cls),
    }


def tuple_schema(cls: type) -> Any:
    """Schema for a named tuple: the item schema for one field, else a fixed array."""
    if not _is_namedtuple(cls):
        raise SchemaError(f"{cls!r} is not a named tuple")
    hints = _type_hints(cls)
    types_ = [hints[name] for name in cls._fields]
    attributes = _class_attributes(cls)
    if len(types_) == 1:
        return apply_attributes(json_schema(types_[0]), attributes)
    count = len(types_)
    return {
        "type": "array",
        "minItems": count,
        "maxItems": count,
        "unevaluatedItems": False,
        "prefixItems": [json_schema(tp) for tp in types_],
        **attributes,
    }


def _unit_schema(cls: type) -> dict[str, Any]:
    return {"type": "null", **_class_attributes(cls)}


def enum_schema(cls: type) -> dict[str, Any]:
    """Schema for an enum or variant container, keyed by variant name."""
    variants = _variants(cls)
    attributes = _class_attributes(cls)
    if all(_is_unit_variant(variant) for _, variant in variants):
        return {"type": "string", "enum": [name for name, _ in variants], **attributes}
    properties: dict[str, Any] = {}
    for name, variant in variants:
        if _is_unit_variant(variant):
            raise SchemaError(
                f"unit variant {name!r} is not supported alongside data variants"
            )
        if _is_dataclass_type(variant):
            properties[name] = struct_schema(variant)
        else:
            properties[name] = tuple_schema(variant)
    return {"type": "object", "properties": properties, **attributes}


def tagged_enum_schema(cls: type, tag: str) -> dict[str, Any]:
    """Schema for an internally tagged enum: one object per variant carrying ``tag``."""
    one_of: list[Any] = []
    for name, variant in _variants(cls):
        if variant is not None and _is_namedtuple(variant):
            raise SchemaError(f"tuple variant {name!r} cannot be internally tagged")
        if variant is not None and _is_dataclass_type(variant):
            required, properties = field_properties(variant)
        else:
            required, properties = [], {}
        properties[tag] = {"type": "string", "const": name}
        required.append(tag)
        variant_attributes = _class_attributes(variant) if variant is not None else {}
        one_of.append(
            {
                "type": "object",
                "properties": properties,
                "required": required,
                **variant_attributes,
            }
        )
    return {"oneOf": one_of, **_class_attributes(cls)}


def derive(cls: type | None = None, *, tag: str | None = None, **kwargs: Any) -> Any:
    """Give ``cls`` a JSON Schema; keyword values become extra top-level keywords.

    Usable bare (``@derive``) or with options (``@derive(tag="type", comment="...")``).
    """
    if cls is None:

        def decorator(target: type) -> type:
            return derive(target, tag=tag, **kwargs)

        return decorator

    if not isinstance(cls, type):
        raise TypeError(f"derive expects a class, got {cls!r}")
    if tag is not None and not isinstance(tag, str):
        raise TypeError(f"tag must be a string, got {tag!r}")

    kind = _kind(cls)
    if tag is not None and kind is not _Kind.ENUM:
        raise SchemaError(f"tag only applies to enums, not to {cls.__name__}")

    setattr(cls, _ATTRIBUTES, schema_attributes(_own_doc(cls), kwargs))

    builder: Callable[[type], Any]
    if kind is _Kind.STRUCT:
        builder = struct_schema
    elif kind is _Kind.TUPLE:
        builder = tuple_schema
    elif kind is _Kind.UNIT:
        builder = _unit_schema
    elif tag is not None:

        def builder(klass: type) -> Any:
            return tagged_enum_schema(klass, tag)

    else:
        builder = enum_schema

    def hook(klass: type) -> Any:
        return builder(klass)

    setattr(cls, SCHEMA_HOOK, classmethod(hook))
    return cls