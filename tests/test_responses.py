from openapi_surface.parser.document import Operation
from openapi_surface.surface.model import Kind, NamedRef, PointerRef
from openapi_surface.surface.responses import build_type_from_responses


def _responses(data: dict):
    return Operation.model_validate({"responses": data}).responses


class TestResponseTypes:
    def test_fields_per_status_code(self):
        t = build_type_from_responses("getPet", _responses({
            200: {"description": "ok", "schema": {"$ref": "#/definitions/Pet"}},
            "default": {"description": "error", "schema": {"$ref": "#/definitions/Error"}},
        }))
        assert t.name == "getPetResponses"
        assert t.description == "getPetResponses holds responses of getPet"
        assert t.kind == Kind.STRUCT
        assert [f.name for f in t.fields] == ["200", "default"]

        ok = t.fields[0]
        assert ok.value_type == NamedRef(name="Pet")
        assert ok.type == PointerRef(target=NamedRef(name="Pet"))
        assert str(ok.type) == "*Pet"
        assert ok.serialize is False
        assert ok.position is None

    def test_responses_without_schema_are_skipped(self):
        t = build_type_from_responses("deletePet", _responses({
            204: {"description": "deleted"},
            "default": {"description": "error", "schema": {"type": "string"}},
        }))
        assert [f.name for f in t.fields] == ["default"]
        assert str(t.fields[0].type) == "*string"

    def test_no_schemas_at_all(self):
        assert build_type_from_responses("deletePet", _responses({204: {"description": "deleted"}})) is None

    def test_empty_responses(self):
        assert build_type_from_responses("deletePet", {}) is None

    def test_references_and_files_are_skipped(self):
        responses = _responses({
            200: {"description": "download", "schema": {"type": "file"}},
            404: {"$ref": "#/responses/NotFound"},
        })
        assert build_type_from_responses("download", responses) is None

    def test_extension_keys_are_dropped(self):
        responses = _responses({
            "x-internal": {"description": "ignored"},
            200: {"description": "ok", "schema": {"type": "integer"}},
        })
        assert list(responses) == ["200"]
