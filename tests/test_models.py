from function_swagger.config import SwaggerSettings
from function_swagger.schema.models import Operation, Parameter, Response, Schema, SecurityScheme


class TestSchema:
    def test_ref_uses_wire_name(self):
        assert Schema(ref="#/definitions/Item").to_dict() == {"$ref": "#/definitions/Item"}

    def test_none_values_are_omitted(self):
        assert Schema(type="string").to_dict() == {"type": "string"}

    def test_empty_properties_are_kept(self):
        assert Schema(type="object", properties={}).to_dict() == {"type": "object", "properties": {}}


class TestParameter:
    def test_body_parameter(self):
        p = Parameter(name="order", in_="body", required=True, schema_=Schema(ref="#/definitions/Order"))
        assert p.to_dict() == {
            "name": "order",
            "in": "body",
            "required": True,
            "schema": {"$ref": "#/definitions/Order"},
        }

    def test_populate_by_wire_name(self):
        p = Parameter(**{"name": "id", "in": "path", "required": True, "type": "integer"})
        assert p.in_ == "path"

    def test_simple_parameter_has_no_ref(self):
        p = Parameter(name="q", in_="query", required=False, type="string")
        assert "ref" not in Parameter.model_fields
        assert p.to_dict() == {"name": "q", "in": "query", "required": False, "type": "string"}


class TestOperation:
    def test_defaults(self):
        op = Operation(
            operation_id="PingGet",
            summary="Run Ping",
            description="This function will run Ping",
            responses={"200": Response(description="OK")},
        )
        data = op.to_dict()
        assert data["operationId"] == "PingGet"
        assert data["produces"] == ["application/json"]
        assert data["parameters"] == []


class TestSecurityScheme:
    def test_wire_names(self):
        scheme = SecurityScheme(type="apiKey", name="code", in_="query")
        assert scheme.to_dict() == {"type": "apiKey", "name": "code", "in": "query"}


class TestSettings:
    def test_route_prefix_is_normalized(self):
        assert SwaggerSettings(route_prefix="api").route_prefix == "/api/"
        assert SwaggerSettings(route_prefix="/").route_prefix == "/"

    def test_default_methods_are_lower_cased(self):
        assert SwaggerSettings(default_methods=("GET",)).default_methods == ("get",)
