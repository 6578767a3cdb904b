"""Translate an operation's parameter list into a parameters type."""

import logging

from openapi_surface.parser.document import Parameter
from openapi_surface.surface.model import Field, Kind, Position, PrimitiveRef, Type, UnsupportedRef
from openapi_surface.surface.types import dump_node, type_for_schema

logger = logging.getLogger(__name__)

NON_BODY_POSITIONS = {
    "header": Position.HEADER,
    "query": Position.QUERY,
    "path": Position.PATH,
    "formData": Position.FORMDATA,
}


def build_type_from_parameters(name: str, parameters: list[Parameter]) -> Type | None:
    """Build ``<name>Parameters``, or return None if no parameter yields a field."""
    type_name = name + "Parameters"
    fields = []
    for parameter in parameters:
        field = _field_for_parameter(parameter)
        if field is None:
            logger.debug("%s: skipping parameter %s", type_name, dump_node(parameter))
            continue
        fields.append(field)

    if not fields:
        return None
    return Type(
        name=type_name,
        description=f"{type_name} holds parameters to {name}",
        kind=Kind.STRUCT,
        fields=fields,
    )


def _field_for_parameter(parameter: Parameter) -> Field | None:
    if parameter.ref:
        return None

    if parameter.location == "body":
        if parameter.content_schema is not None:
            field_type = type_for_schema(parameter.content_schema)
        else:
            field_type = UnsupportedRef(raw=dump_node(parameter))
        return Field(
            name=parameter.name,
            type=field_type,
            position=Position.BODY,
            serialize=True,
        )

    position = NON_BODY_POSITIONS.get(parameter.location)
    if position is None:
        return None
    # non-body parameters declare their primitive type directly
    return Field(
        name=parameter.name,
        type=PrimitiveRef(name=parameter.type),
        format=parameter.format if position == Position.PATH else "",
        position=position,
        serialize=True,
    )
