"""Intermediate model of an API service, consumed by code generators.

A Model holds named composite types and named methods. Methods point at
their parameter and response types by name; field types are type
references, a small tagged union rendered to text with ``str()``.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Kind(str, Enum):
    STRUCT = "STRUCT"
    MAP = "MAP"


class Position(str, Enum):
    """Where a request parameter is transmitted."""

    BODY = "BODY"
    HEADER = "HEADER"
    QUERY = "QUERY"
    PATH = "PATH"
    FORMDATA = "FORMDATA"


class PrimitiveRef(_Frozen):
    """A primitive such as ``string``, ``int32`` or ``int``."""

    variant: Literal["primitive"] = "primitive"
    name: str

    def __str__(self) -> str:
        return self.name


class NamedRef(_Frozen):
    """A reference to another type in the model."""

    variant: Literal["named"] = "named"
    name: str

    def __str__(self) -> str:
        return self.name


class ArrayRef(_Frozen):
    variant: Literal["array"] = "array"
    item: NamedRef

    def __str__(self) -> str:
        return f"[]{self.item}"


class MapRef(_Frozen):
    """A string-keyed map; without a value type it holds anything."""

    variant: Literal["map"] = "map"
    value: NamedRef | None = None

    def __str__(self) -> str:
        return f"map[string]{self.value or 'any'}"


class PointerRef(_Frozen):
    variant: Literal["pointer"] = "pointer"
    target: "TypeRef"

    def __str__(self) -> str:
        return f"*{self.target}"


class UnsupportedRef(_Frozen):
    """A schema shape with no mapping; ``raw`` is its textual dump.

    Generators should treat it as untyped.
    """

    variant: Literal["unsupported"] = "unsupported"
    raw: str

    def __str__(self) -> str:
        return self.raw


TypeRef = Annotated[
    Union[PrimitiveRef, NamedRef, ArrayRef, MapRef, PointerRef, UnsupportedRef],
    Discriminator("variant"),
]

PointerRef.model_rebuild()


class Field(_Frozen):
    """One member of a STRUCT type.

    ``position`` is only set for parameter fields; ``value_type`` only for
    response fields, whose ``type`` is a pointer to it.
    """

    name: str
    type: TypeRef
    value_type: TypeRef | None = None
    format: str = ""
    position: Position | None = None
    serialize: bool = False


class Type(_Frozen):
    name: str
    description: str = ""
    kind: Kind | None = None
    fields: tuple[Field, ...] = ()
    map_value_type: TypeRef | None = None


class Method(_Frozen):
    name: str
    operation: str = ""
    path: str
    http_method: str  # GET / POST / PUT / DELETE
    description: str = ""
    parameters_type_name: str = ""
    responses_type_name: str = ""


class Model(_Frozen):
    """The complete intermediate model of one API description."""

    name: str
    types: tuple[Type, ...] = ()
    methods: tuple[Method, ...] = ()

    def type_named(self, name: str) -> Type | None:
        for t in self.types:
            if t.name == name:
                return t
        return None

    def method_named(self, name: str) -> Method | None:
        for m in self.methods:
            if m.name == name:
                return m
        return None
