"""Typed models of a Swagger 2.0 document.

The loader turns raw YAML/JSON into these models; the surface builder
only ever reads them. Unknown keys are kept (``extra="allow"``) so they
show up in the opaque fallback dump of a schema.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


def _drop_extensions(value):
    if isinstance(value, dict):
        return {str(k): v for k, v in value.items() if not str(k).startswith("x-")}
    return value


class Schema(_Node):
    """A schema node: primitive, object, array or a reference."""

    ref: str = Field("", alias="$ref")
    type: list[str] = []  # one entry in well-formed documents
    format: str = ""
    description: str = ""
    items: list["Schema"] = []
    properties: dict[str, "Schema"] = {}
    additional_properties: "Schema | bool | None" = Field(None, alias="additionalProperties")

    @field_validator("type", "items", mode="before")
    @classmethod
    def _as_list(cls, value):
        if value is None:
            return []
        if not isinstance(value, list):
            return [value]
        return value

    @field_validator("properties", mode="before")
    @classmethod
    def _properties(cls, value):
        return {} if value is None else value


class Parameter(_Node):
    """A parameter entry; either a concrete parameter or a ``$ref`` to one."""

    ref: str = Field("", alias="$ref")
    name: str = ""
    location: str = Field("", alias="in")  # body / header / query / path / formData
    description: str = ""
    required: bool = False
    type: str = ""
    format: str = ""
    content_schema: Schema | None = Field(None, alias="schema")


class Response(_Node):
    ref: str = Field("", alias="$ref")
    description: str = ""
    content_schema: Schema | None = Field(None, alias="schema")


class Operation(_Node):
    operation_id: str = Field("", alias="operationId")
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    parameters: list[Parameter] = []
    responses: dict[str, Response] = {}

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes(cls, value):
        # YAML reads unquoted status codes as integers
        return _drop_extensions(value)


class PathItem(_Node):
    ref: str = Field("", alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Parameter] = []


class Info(_Node):
    title: str
    version: str = ""
    description: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, value):
        # "version: 1.0" is read as a float
        return "" if value is None else str(value)


class Document(_Node):
    """Root of a Swagger 2.0 document."""

    swagger: str = "2.0"
    info: Info
    paths: dict[str, PathItem]
    definitions: dict[str, Schema] = {}

    @field_validator("swagger", mode="before")
    @classmethod
    def _swagger_text(cls, value):
        return str(value)

    @field_validator("paths", mode="before")
    @classmethod
    def _path_entries(cls, value):
        return _drop_extensions(value)

    @field_validator("definitions", mode="before")
    @classmethod
    def _definitions(cls, value):
        return {} if value is None else value
