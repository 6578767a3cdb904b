"""Build the intermediate model of an API service from a Swagger 2.0 document.

Translators return finished, immutable values; ModelBuilder is the only
place they are collected, in document order.
"""

import logging

from openapi_surface.parser.document import Document, Operation
from openapi_surface.parser.swagger import parse_document
from openapi_surface.surface.definitions import build_type_from_definition
from openapi_surface.surface.model import Method, Model, Type
from openapi_surface.surface.naming import generate_operation_name, sanitize_operation_name
from openapi_surface.surface.parameters import build_type_from_parameters
from openapi_surface.surface.responses import build_type_from_responses

logger = logging.getLogger(__name__)

# Only these verbs become methods, in this order.
METHODS = ("GET", "POST", "PUT", "DELETE")
IGNORED_METHODS = ("OPTIONS", "HEAD", "PATCH")


def build_model(document: Document | dict) -> Model:
    """Build a Model from a Document (or its raw mapping).

    Raises MalformedDocumentError if a raw mapping is not a usable document.
    """
    document = parse_document(document)
    builder = ModelBuilder(document.info.title)

    for name, schema in document.definitions.items():
        builder.add_type(build_type_from_definition(name, schema))

    for path, item in document.paths.items():
        for method in METHODS:
            operation = getattr(item, method.lower())
            if operation is not None:
                builder.add_operation(operation, method, path)
        for method in IGNORED_METHODS:
            if getattr(item, method.lower()) is not None:
                logger.debug("not modelling %s %s", method, path)

    model = builder.build()
    logger.info(
        "built model %r: %d types, %d methods",
        model.name,
        len(model.types),
        len(model.methods),
    )
    return model


class ModelBuilder:
    """Collects types and methods in insertion order."""

    def __init__(self, name: str):
        self.name = name
        self.types: list[Type] = []
        self.methods: list[Method] = []
        self._names: set[str] = set()

    def add_type(self, t: Type | None) -> str:
        """Append a type; returns its name, or "" for None."""
        if t is None:
            return ""
        self.types.append(t)
        self._names.add(t.name)
        return t.name

    def add_method(self, m: Method) -> None:
        self.methods.append(m)
        self._names.add(m.name)

    def unique_method_name(self, name: str) -> str:
        """Suffix ``_2``, ``_3``... until neither the name nor its derived
        type names are taken."""
        candidate = name
        n = 1
        while self._is_taken(candidate):
            n += 1
            candidate = f"{name}_{n}"
        return candidate

    def _is_taken(self, name: str) -> bool:
        return any(
            taken in self._names
            for taken in (name, name + "Parameters", name + "Responses")
        )

    def add_operation(self, operation: Operation, method: str, path: str) -> Method:
        name = sanitize_operation_name(operation.operation_id)
        if not name:
            name = generate_operation_name(method, path)
        name = self.unique_method_name(name)

        parameters_type_name = self.add_type(
            build_type_from_parameters(name, operation.parameters)
        )
        responses_type_name = self.add_type(
            build_type_from_responses(name, operation.responses)
        )
        m = Method(
            name=name,
            operation=operation.operation_id,
            path=path,
            http_method=method,
            description=operation.description,
            parameters_type_name=parameters_type_name,
            responses_type_name=responses_type_name,
        )
        self.add_method(m)
        return m

    def build(self) -> Model:
        return Model(name=self.name, types=self.types, methods=self.methods)
