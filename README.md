# schema_derive

Build JSON Schema documents straight from your Python types.

`schema_derive` turns type annotations into plain `dict` schemas: builtin
types, lists, fixed-length arrays, optionals, dataclasses, named tuples, enums
and classes that group variants. Class-level and field-level schema keywords
are attached where the type is defined. It has no dependencies outside the
standard library.

## Installation

```
pip install schema_derive
```

To run the test suite:

```
pip install "schema_derive[test]"
pytest
```

## Builtin types

`schema_derive.core.json_schema` gives the schema of a type:

```python
from typing import Optional
from schema_derive.core import Array, json_schema

json_schema(int)              # {"type": "number"}
json_schema(float)            # {"type": "number"}
json_schema(bool)             # {"type": "boolean"}
json_schema(str)              # {"type": "string"}
json_schema(None)             # {"type": "null"}
json_schema(list[int])        # {"type": "array", "items": {"type": "number"}}
json_schema(Optional[bool])   # {"type": "boolean"}
json_schema(Array[int, 3])
# {"type": "array", "items": {"type": "number"}, "maxItems": 3, "minItems": 3}
```

`Array[T, N]` annotates a list of exactly `N` items of type `T`; `N` must be a
non-negative `int`.

An optional type has the schema of the type it wraps; what changes is that a
field holding it is left out of `required`. `is_optional(tp)` tells whether an
annotation is a union that admits `None`. Unions of more than one non-`None`
type, and any type with no schema, raise `SchemaError` (a `TypeError`).

Any class that defines a `__json_schema__` classmethod supplies its own schema;
this is what `derive` adds to a class. `json_schema` returns a fresh copy each
time.

## Dataclasses

```python
from dataclasses import dataclass
from typing import Optional
from schema_derive.attributes import field
from schema_derive.core import json_schema
from schema_derive.derive import derive


@derive(comment="Test comment")
@dataclass
class User:
    name: str = field(comment="test field", minLength=3)
    age: int = field()
    active: Optional[bool] = field(default=None)
    scores: list[int] = field(default_factory=list)


json_schema(User)
```

gives

```json
{
  "type": "object",
  "required": ["name", "age", "scores"],
  "properties": {
    "name": {"type": "string", "comment": "test field", "minLength": 3},
    "age": {"type": "number"},
    "active": {"type": "boolean"},
    "scores": {"type": "array", "items": {"type": "number"}}
  },
  "comment": "Test comment"
}
```

Keyword values passed to `derive` or `field` become schema keywords; they must
be JSON values, otherwise `SchemaError` is raised. A docstring written on the
class becomes the schema's `description` (docstrings that Python generates for
dataclasses, named tuples and enums are ignored), and an explicit
`description=` keyword overrides it. Plain dataclass fields work too; they
simply carry no extra keywords.

### Field options

`field()` accepts `default` and `default_factory` as `dataclasses.field` does,
and these options:

- `skip=True` leaves the field out of the schema.
- `rename="new_name"` publishes the field under another name.
- `flatten=True` merges the nested class's `properties` and `required` into
  the enclosing object.

`field_options(dataclass_field)` returns the `SerdeOptions` attached to a
dataclass field (or the defaults), `schema_attributes(doc, attributes)` builds
the extra keywords from a docstring and a mapping, and
`apply_attributes(schema, attributes)` merges them into an object schema.

## Named tuples

A derived `NamedTuple` with one field has the schema of that field plus the
class keywords. With several fields it becomes a fixed array:

```python
from typing import NamedTuple
from schema_derive.derive import derive


@derive
class Point(NamedTuple):
    x: str
    y: int

# {"type": "array", "minItems": 2, "maxItems": 2, "unevaluatedItems": False,
#  "prefixItems": [{"type": "string"}, {"type": "number"}]}
```

A derived class with no annotations and no nested classes has the schema
`{"type": "null"}`. A class with annotations that is neither a dataclass nor a
named tuple raises `SchemaError`.

## Enums and variants

An `enum.Enum` becomes a string enumeration of its member names:

```python
import enum


@derive
class Colour(enum.Enum):
    RED = 1
    GREEN = 2

# {"type": "string", "enum": ["RED", "GREEN"]}
```

A plain class whose nested classes are dataclasses or named tuples is treated
as a set of variants; its schema is an object with one property per variant:

```python
@derive
class Shape:
    @dataclass
    class Circle:
        radius: float

    @dataclass
    class Square:
        side: float

# {"type": "object", "properties": {
#     "Circle": {"type": "object", "required": ["radius"],
#                "properties": {"radius": {"type": "number"}}},
#     "Square": {"type": "object", "required": ["side"],
#                "properties": {"side": {"type": "number"}}}}}
```

Mixing unit variants with data variants raises `SchemaError`.

Passing `tag=` to `derive` describes an internally tagged enum: each variant
becomes an alternative in `oneOf`, holding the variant's own fields and the
tag property fixed to the variant's name. Tuple variants cannot be tagged, and
`tag` is only accepted on enums and variant containers.

```python
@derive(tag="type")
class Event(enum.Enum):
    LOGIN = enum.auto()
    LOGOUT = enum.auto()

# {"oneOf": [
#     {"type": "object", "properties": {"type": {"type": "string", "const": "LOGIN"}},
#      "required": ["type"]},
#     {"type": "object", "properties": {"type": {"type": "string", "const": "LOGOUT"}},
#      "required": ["type"]}]}
```

## Lower-level builders

`schema_derive.derive` also exposes `struct_schema`, `tuple_schema`,
`enum_schema`, `tagged_enum_schema` and `field_properties`, for assembling
schemas by hand.

## What it does not do

`schema_derive` only produces schemas. It does not validate data against them,
serialise objects, or read and write schema files; pass the returned `dict` to
a JSON Schema validator or `json.dumps` for that.