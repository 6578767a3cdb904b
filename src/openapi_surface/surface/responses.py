"""Translate an operation's responses into a responses type."""

import logging

from openapi_surface.parser.document import Response
from openapi_surface.surface.model import Field, Kind, PointerRef, Type
from openapi_surface.surface.types import type_for_schema

logger = logging.getLogger(__name__)


def build_type_from_responses(name: str, responses: dict[str, Response]) -> Type | None:
    """Build ``<name>Responses`` with one field per status code that has a schema.

    Returns None when no response carries a schema.
    """
    type_name = name + "Responses"
    fields = []
    for code, response in responses.items():
        schema = response.content_schema
        if response.ref or schema is None or schema.type == ["file"]:
            logger.debug("%s: no schema for response %s", type_name, code)
            continue
        value_type = type_for_schema(schema)
        fields.append(
            Field(
                name=code,
                type=PointerRef(target=value_type),
                value_type=value_type,
                serialize=False,
            )
        )

    if not fields:
        return None
    return Type(
        name=type_name,
        description=f"{type_name} holds responses of {name}",
        kind=Kind.STRUCT,
        fields=fields,
    )
