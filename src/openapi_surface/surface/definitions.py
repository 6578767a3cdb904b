"""Translate named schema definitions into model types."""

from openapi_surface.parser.document import Schema
from openapi_surface.surface.model import Field, Kind, Type
from openapi_surface.surface.types import type_for_schema


def build_type_from_definition(name: str, schema: Schema) -> Type:
    """Build the Type for one entry of the definitions section.

    Properties make a STRUCT; a property-less schema whose
    additionalProperties references a type makes a MAP of that type.
    Anything else yields a Type with no kind and no fields.
    """
    kind = None
    map_value_type = None
    fields = [
        Field(name=prop_name, type=type_for_schema(prop_schema), serialize=True)
        for prop_name, prop_schema in schema.properties.items()
    ]
    if fields:
        kind = Kind.STRUCT
    else:
        value = schema.additional_properties
        if isinstance(value, Schema) and value.ref:
            kind = Kind.MAP
            map_value_type = type_for_schema(value)

    return Type(
        name=name,
        description="implements the service definition of " + name,
        kind=kind,
        fields=fields,
        map_value_type=map_value_type,
    )
