import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar, Optional

import pytest
from pydantic import BaseModel

from function_swagger.functions.decorators import Required
from function_swagger.schema.mapper import map_type, primitive_schema
from function_swagger.schema.registry import DefinitionRegistry
from function_swagger.schema.types import Byte, Float32, Int32, Int64, fields_of, is_structured, strip_type


class Color(Enum):
    RED = "red"


@dataclass
class Item:
    Id: int
    Name: str


@dataclass
class Node:
    value: int
    next: Optional["Node"] = None


@dataclass
class Ping:
    pong: "Pong"


@dataclass
class Pong:
    ping: Ping


class Point:
    x: float
    y: float
    origin: ClassVar[str] = "0,0"
    _cache: dict


class Basket(BaseModel):
    first: Item
    second: Item
    label: Annotated[str, Required]


@dataclass
class Tagged:
    tags: list[str] = field(default_factory=list)


class TestMapType:
    @pytest.mark.parametrize(
        "tp, expected",
        [
            (int, {"type": "integer", "format": "int32"}),
            (Int32, {"type": "integer", "format": "int32"}),
            (Int64, {"type": "integer", "format": "int64"}),
            (Float32, {"type": "number", "format": "float"}),
            (float, {"type": "number", "format": "double"}),
            (str, {"type": "string"}),
            (Byte, {"type": "string", "format": "byte"}),
            (bool, {"type": "boolean"}),
            (datetime.datetime, {"type": "string", "format": "date"}),
            (datetime.date, {"type": "string", "format": "date"}),
        ],
    )
    def test_primitive_table(self, tp, expected):
        assert map_type(tp).to_dict() == expected

    @pytest.mark.parametrize("tp", [Decimal, Color, Any, list[int], dict[str, int]])
    def test_unknown_kinds_fall_back_to_string(self, tp):
        assert map_type(tp).to_dict() == {"type": "string"}

    def test_annotated_and_optional_are_stripped(self):
        assert map_type(Annotated[Optional[Int64], Required]).to_dict() == {"type": "integer", "format": "int64"}

    def test_structured_without_registry_is_string(self):
        assert map_type(Item).to_dict() == {"type": "string"}

    def test_structured_with_registry_is_ref(self):
        registry = DefinitionRegistry()
        assert map_type(Item, registry).to_dict() == {"$ref": "#/definitions/Item"}
        assert "Item" in registry

    def test_primitive_schema_never_registers(self):
        assert primitive_schema(Item).to_dict() == {"type": "string"}


class TestTypes:
    def test_is_structured(self):
        assert is_structured(Item)
        assert is_structured(Basket)
        assert is_structured(Point)
        assert not is_structured(int)
        assert not is_structured(Int32)
        assert not is_structured(Color)
        assert not is_structured(list[Item])
        assert not is_structured(datetime.datetime)

    def test_strip_type_keeps_unions(self):
        tp, _ = strip_type(int | str)
        assert tp == int | str

    def test_strip_type_collects_metadata(self):
        tp, metadata = strip_type(Annotated[Optional[str], Required])
        assert tp is str
        assert metadata == (Required,)

    def test_fields_of_plain_class_skips_private_and_classvars(self):
        assert [f.name for f in fields_of(Point)] == ["x", "y"]

    def test_fields_of_pydantic_model_reads_required_marker(self):
        fields = {f.name: f for f in fields_of(Basket)}
        assert fields["label"].required is True
        assert fields["label"].annotation is str
        assert fields["first"].required is False


class TestDefinitionRegistry:
    def test_round_trip_definition(self):
        registry = DefinitionRegistry()
        registry.ensure(Item)
        assert registry.definitions["Item"].to_dict() == {
            "type": "object",
            "properties": {
                "Id": {"type": "integer", "format": "int32"},
                "Name": {"type": "string"},
            },
        }

    def test_repeated_references_register_once(self):
        registry = DefinitionRegistry()
        registry.ensure(Basket)
        registry.ensure(Basket)
        registry.ref_for(Item)
        assert sorted(registry.definitions) == ["Basket", "Item"]
        props = registry.definitions["Basket"].to_dict()["properties"]
        assert props["first"] == {"$ref": "#/definitions/Item"}
        assert props["second"] == {"$ref": "#/definitions/Item"}

    def test_self_reference_terminates(self):
        registry = DefinitionRegistry()
        registry.ensure(Node)
        assert len(registry) == 1
        assert registry.definitions["Node"].to_dict()["properties"]["next"] == {"$ref": "#/definitions/Node"}

    def test_indirect_cycle_terminates(self):
        registry = DefinitionRegistry()
        registry.ensure(Ping)
        assert sorted(registry.definitions) == ["Ping", "Pong"]
        assert registry.definitions["Pong"].to_dict()["properties"]["ping"] == {"$ref": "#/definitions/Ping"}

    def test_container_fields_are_strings(self):
        registry = DefinitionRegistry()
        registry.ensure(Tagged)
        assert registry.definitions["Tagged"].to_dict()["properties"]["tags"] == {"type": "string"}

    def test_registries_are_independent(self):
        first = DefinitionRegistry()
        first.ensure(Item)
        assert len(DefinitionRegistry()) == 0
