"""Per-field options and extra schema keywords."""

from __future__ import annotations

import dataclasses
import inspect
import json
from collections.abc import Mapping
from typing import Any

from .core import SchemaError

_METADATA_KEY = "schema_derive"


def _to_json(key: str, value: Any) -> Any:
    try:
        encoded = json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SchemaError(f"value for schema keyword {key!r} is not JSON: {value!r}") from exc
    return json.loads(encoded)


def schema_attributes(doc: str | None, attributes: Mapping[str, Any] | None) -> dict[str, Any]:
    """Build the extra schema keywords from a docstring and keyword values.

    The docstring becomes ``description``; the keywords follow and may override it.
    Values are normalised to plain JSON values.
    """
    result: dict[str, Any] = {}
    if doc is not None:
        result["description"] = inspect.cleandoc(doc)
    for key, value in (attributes or {}).items():
        if not isinstance(key, str):
            raise SchemaError(f"schema keyword must be a string, got {key!r}")
        result[key] = _to_json(key, value)
    return result


def apply_attributes(schema: Any, attributes: Mapping[str, Any]) -> Any:
    """Return ``schema`` with ``attributes`` added; non-object schemas are returned unchanged."""
    if isinstance(schema, dict):
        return {**schema, **attributes}
    return schema


@dataclasses.dataclass(frozen=True)
class SerdeOptions:
    """How a field appears in a derived schema."""

    skip: bool = False
    rename: str | None = None
    flatten: bool = False
    attributes: Mapping[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.skip, bool) or not isinstance(self.flatten, bool):
            raise TypeError("skip and flatten must be booleans")
        if self.rename is not None and not isinstance(self.rename, str):
            raise TypeError(f"rename must be a string, got {self.rename!r}")
        object.__setattr__(self, "attributes", schema_attributes(None, self.attributes))


def field(
    *,
    skip: bool = False,
    rename: str | None = None,
    flatten: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """A dataclass field carrying schema options; extra keywords become schema keywords."""
    options = SerdeOptions(skip=skip, rename=rename, flatten=flatten, attributes=kwargs)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: options},
    )


def field_options(dataclass_field: dataclasses.Field) -> SerdeOptions:
    """Return the schema options attached to a dataclass field, or the defaults."""
    if not isinstance(dataclass_field, dataclasses.Field):
        raise TypeError(f"expected a dataclass field, got {dataclass_field!r}")
    options = dataclass_field.metadata.get(_METADATA_KEY)
    return options if isinstance(options, SerdeOptions) else SerdeOptions()