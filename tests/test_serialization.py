"""
Tests for serialization and deserialization of schema objects.

These tests check the dict shape used by schema extractors, lossless
JSON/YAML round trips, order preservation and the error paths of
`componentcodegen.serialization`.
"""

import pytest

from componentcodegen.examples import build_example_schema
from componentcodegen.model import ComponentModule, NativeModule, SchemaFormatError
from componentcodegen.type_annotations import ReservedTypeAnnotation, ReservedTypeName
from componentcodegen.serialization import (
    command_to_dict,
    schema_from_dict,
    schema_from_json,
    schema_from_yaml,
    schema_to_dict,
    schema_to_json,
    schema_to_yaml,
)
from componentcodegen.backends import OUTPUT_FILE_NAME, generate


TOGGLE_DICT = {
    "modules": {
        "ToggleNativeComponent": {
            "type": "Component",
            "components": {
                "Toggle": {
                    "excludedPlatforms": ["android"],
                    "commands": [
                        {
                            "name": "setValue",
                            "optional": False,
                            "typeAnnotation": {
                                "type": "FunctionTypeAnnotation",
                                "params": [
                                    {
                                        "name": "value",
                                        "optional": False,
                                        "typeAnnotation": {"type": "BooleanTypeAnnotation"},
                                    },
                                ],
                                "returnTypeAnnotation": {"type": "VoidTypeAnnotation"},
                            },
                        },
                    ],
                },
            },
        },
    },
}


def test_schema_from_dict():
    schema = schema_from_dict(TOGGLE_DICT)
    toggle = schema.get_module("ToggleNativeComponent").get_component("Toggle")
    assert toggle.excluded_platforms == ["android"]
    assert toggle.get_command("setValue").get_param("value").type_annotation.type == "BooleanTypeAnnotation"


def test_command_dict_shape():
    schema = schema_from_dict(TOGGLE_DICT)
    command = schema.get_module("ToggleNativeComponent").get_component("Toggle").commands[0]
    assert command_to_dict(command) == TOGGLE_DICT["modules"]["ToggleNativeComponent"]["components"]["Toggle"]["commands"][0]


def test_json_roundtrip():
    schema = build_example_schema()
    restored = schema_from_json(schema_to_json(schema))
    assert restored == schema
    assert schema_to_dict(restored) == schema_to_dict(schema)


def test_yaml_roundtrip():
    schema = build_example_schema()
    restored = schema_from_yaml(schema_to_yaml(schema))
    assert restored == schema


def test_roundtrip_preserves_generated_output():
    schema = build_example_schema()
    restored = schema_from_yaml(schema_to_yaml(schema))
    assert generate("Lib", restored)[OUTPUT_FILE_NAME] == generate("Lib", schema)[OUTPUT_FILE_NAME]


def test_module_order_preserved():
    schema = build_example_schema()
    assert list(schema_from_json(schema_to_json(schema)).modules) == list(schema.modules)
    assert list(schema_from_yaml(schema_to_yaml(schema)).modules) == list(schema.modules)


def test_reserved_type():
    d = {"type": "ReservedTypeAnnotation", "name": "RootTag"}
    schema = schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [
        {"name": "focus", "typeAnnotation": {"params": [{"name": "rootTag", "typeAnnotation": d}]}},
    ]}}}}})
    param = schema.get_module("M").get_component("C").commands[0].params[0]
    assert param.type_annotation == ReservedTypeAnnotation(ReservedTypeName.ROOT_TAG)


def test_module_without_components():
    schema = schema_from_dict({"modules": {"M": {"type": "Component"}}})
    assert schema.get_module("M") == ComponentModule()
    assert schema_to_dict(schema) == {"modules": {"M": {"type": "Component"}}}


def test_native_module_kept_verbatim():
    d = {"modules": {"Clipboard": {"type": "NativeModule", "moduleName": "Clipboard"}}}
    schema = schema_from_dict(d)
    assert isinstance(schema.get_module("Clipboard"), NativeModule)
    assert schema_to_dict(schema) == d


def test_empty_yaml_document():
    assert schema_from_yaml("").modules == {}


class TestSchemaErrors:
    """Test malformed input handling."""

    def test_unknown_module_type(self):
        with pytest.raises(SchemaFormatError, match="Unsupported module type"):
            schema_from_dict({"modules": {"M": {"type": "Mystery"}}})

    def test_unknown_param_type(self):
        with pytest.raises(SchemaFormatError, match="MixedTypeAnnotation"):
            schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [
                {"name": "set", "typeAnnotation": {"params": [
                    {"name": "v", "typeAnnotation": {"type": "MixedTypeAnnotation"}},
                ]}},
            ]}}}}})

    def test_unknown_reserved_name(self):
        with pytest.raises(SchemaFormatError, match="Bogus"):
            schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [
                {"name": "set", "typeAnnotation": {"params": [
                    {"name": "v", "typeAnnotation": {"type": "ReservedTypeAnnotation", "name": "Bogus"}},
                ]}},
            ]}}}}})

    def test_missing_command_name(self):
        with pytest.raises(SchemaFormatError, match="name"):
            schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [{}]}}}}})

    def test_missing_command_type_annotation(self):
        with pytest.raises(SchemaFormatError, match="typeAnnotation"):
            schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [
                {"name": "reset"},
            ]}}}}})

    @pytest.mark.parametrize("value", [None, "FunctionTypeAnnotation", []])
    def test_command_type_annotation_not_a_mapping(self, value):
        with pytest.raises(SchemaFormatError, match="reset typeAnnotation must be a mapping"):
            schema_from_dict({"modules": {"M": {"type": "Component", "components": {"C": {"commands": [
                {"name": "reset", "typeAnnotation": value},
            ]}}}}})

    def test_unknown_platform_warns(self):
        with pytest.warns(UserWarning, match="windows"):
            schema = schema_from_dict({"modules": {"M": {"type": "Component", "components": {
                "C": {"commands": [], "excludedPlatforms": ["windows"]},
            }}}})
        assert schema.get_module("M").get_component("C").excluded_platforms == ["windows"]
