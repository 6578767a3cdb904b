from openapi_surface.parser.document import Schema
from openapi_surface.surface.model import (
    ArrayRef,
    MapRef,
    NamedRef,
    PrimitiveRef,
    UnsupportedRef,
)
from openapi_surface.surface.types import name_for_ref, type_for_schema


def _schema(**data) -> Schema:
    return Schema.model_validate(data)


class TestNameForRef:
    def test_definition_pointer(self):
        assert name_for_ref("#/definitions/Pet") == "Pet"

    def test_bare_name(self):
        assert name_for_ref("Pet") == "Pet"


class TestReferences:
    def test_ref_becomes_named_type(self):
        assert type_for_schema(_schema(**{"$ref": "#/definitions/Pet"})) == NamedRef(name="Pet")

    def test_ref_wins_over_inline_type(self):
        schema = _schema(**{"$ref": "#/definitions/Pet", "type": "string", "format": "int32"})
        assert type_for_schema(schema) == NamedRef(name="Pet")


class TestPrimitives:
    def test_string(self):
        assert type_for_schema(_schema(type="string")) == PrimitiveRef(name="string")

    def test_string_given_as_list(self):
        assert str(type_for_schema(_schema(type=["string"]))) == "string"

    def test_int32(self):
        assert str(type_for_schema(_schema(type="integer", format="int32"))) == "int32"

    def test_integer_default(self):
        assert str(type_for_schema(_schema(type="integer"))) == "int"
        assert str(type_for_schema(_schema(type="integer", format="int64"))) == "int"

    def test_number_maps_to_integer(self):
        assert str(type_for_schema(_schema(type="number", format="double"))) == "int"


class TestContainers:
    def test_array_of_reference(self):
        schema = _schema(type="array", items={"$ref": "#/definitions/Pet"})
        result = type_for_schema(schema)
        assert result == ArrayRef(item=NamedRef(name="Pet"))
        assert str(result) == "[]Pet"

    def test_open_object(self):
        result = type_for_schema(_schema(type="object"))
        assert result == MapRef()
        assert str(result) == "map[string]any"

    def test_object_with_referenced_values(self):
        schema = _schema(type="object", additionalProperties={"$ref": "#/definitions/Pet"})
        result = type_for_schema(schema)
        assert result == MapRef(value=NamedRef(name="Pet"))
        assert str(result) == "map[string]Pet"

    def test_untyped_map_of_reference(self):
        schema = _schema(additionalProperties={"$ref": "#/definitions/Tag"})
        assert str(type_for_schema(schema)) == "map[string]Tag"


class TestFallback:
    def test_multiple_types(self):
        result = type_for_schema(_schema(type=["string", "number"]))
        assert isinstance(result, UnsupportedRef)
        assert result.raw
        assert "number" in str(result)

    def test_array_of_primitives(self):
        result = type_for_schema(_schema(type="array", items={"type": "string"}))
        assert isinstance(result, UnsupportedRef)

    def test_object_with_inline_map_values(self):
        schema = _schema(type="object", additionalProperties={"type": "string"})
        assert isinstance(type_for_schema(schema), UnsupportedRef)

    def test_boolean(self):
        assert isinstance(type_for_schema(_schema(type="boolean")), UnsupportedRef)

    def test_composed_schema_keeps_unknown_keys(self):
        schema = _schema(allOf=[{"$ref": "#/definitions/Pet"}])
        result = type_for_schema(schema)
        assert isinstance(result, UnsupportedRef)
        assert "allOf" in result.raw

    def test_empty_schema(self):
        result = type_for_schema(Schema())
        assert isinstance(result, UnsupportedRef)
        assert result.raw == "{}"
