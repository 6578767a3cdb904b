"""Type inference: maps one schema node to a type reference.

The mapping is deliberately small. Anything it does not recognize comes
back as an UnsupportedRef carrying a dump of the node, so inference never
fails.
"""

import logging

from openapi_surface.parser.document import Schema
from openapi_surface.surface.model import (
    ArrayRef,
    MapRef,
    NamedRef,
    PrimitiveRef,
    TypeRef,
    UnsupportedRef,
)

logger = logging.getLogger(__name__)


def name_for_ref(ref: str) -> str:
    """Return the bare type name of a reference ("#/definitions/Pet" -> "Pet")."""
    return ref.rsplit("/", 1)[-1]


def type_for_schema(schema: Schema) -> TypeRef:
    """Infer the type reference of a schema node."""
    if schema.ref:
        return NamedRef(name=name_for_ref(schema.ref))

    if len(schema.type) == 1:
        declared = schema.type[0]
        if declared == "string":
            return PrimitiveRef(name="string")
        if declared == "integer" and schema.format == "int32":
            return PrimitiveRef(name="int32")
        if declared == "integer":
            return PrimitiveRef(name="int")
        # numbers are mapped to the default integer on purpose
        if declared == "number":
            return PrimitiveRef(name="int")
        if declared == "array" and len(schema.items) == 1 and schema.items[0].ref:
            return ArrayRef(item=NamedRef(name=name_for_ref(schema.items[0].ref)))
        if declared == "object" and schema.additional_properties is None:
            return MapRef()

    value = schema.additional_properties
    if isinstance(value, Schema) and value.ref:
        return MapRef(value=NamedRef(name=name_for_ref(value.ref)))

    raw = dump_node(schema)
    logger.debug("no type mapping for schema %s", raw)
    return UnsupportedRef(raw=raw)


def dump_node(node) -> str:
    """Compact textual dump of an input node, by wire names."""
    return node.model_dump_json(by_alias=True, exclude_defaults=True)
