"""
Serialization helpers for schema objects (Schema, Component, Command, etc.).

Converts between model objects and the plain dict shape emitted by schema
extractors, with JSON/YAML helpers on top. Module, component, command and
param order are preserved in both directions.

This module does not parse component source files; it only moves an
already-extracted schema tree in and out of the model.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from componentcodegen.model import (
    Command,
    Component,
    ComponentModule,
    Module,
    NativeModule,
    Param,
    Platform,
    Schema,
    SchemaFormatError,
)
from componentcodegen.type_annotations import (
    SIMPLE_TYPE_ANNOTATIONS,
    ReservedTypeAnnotation,
    ReservedTypeName,
    TypeAnnotation,
)


KNOWN_PLATFORMS = frozenset(p.value for p in Platform)


def type_annotation_to_dict(t: TypeAnnotation) -> Dict[str, Any]:
    if isinstance(t, ReservedTypeAnnotation):
        return {"type": t.type, "name": t.name.value}
    if type(t) in SIMPLE_TYPE_ANNOTATIONS.values():
        return {"type": t.type}
    raise TypeError(f"Unsupported type annotation: {type(t)}")


def type_annotation_from_dict(d: Dict[str, Any]) -> TypeAnnotation:
    t = d.get("type")
    if t == ReservedTypeAnnotation.TYPE:
        try:
            return ReservedTypeAnnotation(ReservedTypeName(d["name"]))
        except (KeyError, ValueError) as e:
            raise SchemaFormatError(f"Unsupported reserved type: {d.get('name')}") from e
    cls = SIMPLE_TYPE_ANNOTATIONS.get(t)
    if cls is None:
        raise SchemaFormatError(f"Unsupported param type annotation: {t}")
    return cls()


def param_to_dict(p: Param) -> Dict[str, Any]:
    return {
        "name": p.name,
        "optional": p.optional,
        "typeAnnotation": type_annotation_to_dict(p.type_annotation),
    }


def param_from_dict(d: Dict[str, Any]) -> Param:
    return Param(
        name=d["name"],
        type_annotation=type_annotation_from_dict(d["typeAnnotation"]),
        optional=d.get("optional", False),
    )


def command_to_dict(c: Command) -> Dict[str, Any]:
    return {
        "name": c.name,
        "optional": c.optional,
        "typeAnnotation": {
            "type": "FunctionTypeAnnotation",
            "params": [param_to_dict(p) for p in c.params],
            "returnTypeAnnotation": {"type": "VoidTypeAnnotation"},
        },
    }


def command_from_dict(d: Dict[str, Any]) -> Command:
    name = d["name"]
    fn = d["typeAnnotation"]
    if not isinstance(fn, dict):
        raise SchemaFormatError(
            f"Command {name} typeAnnotation must be a mapping, got {type(fn).__name__}"
        )
    return Command(
        name=name,
        params=[param_from_dict(p) for p in fn.get("params", [])],
        optional=d.get("optional", False),
    )


def _excluded_platforms_from_list(component_name: str, raw: List[str] | None) -> List[str] | None:
    if raw is None:
        return None
    for platform in raw:
        if platform not in KNOWN_PLATFORMS:
            warnings.warn(
                f"Unknown excluded platform for {component_name}: {platform}",
                UserWarning,
            )
    return list(raw)


def component_to_dict(c: Component) -> Dict[str, Any]:
    d: Dict[str, Any] = {"commands": [command_to_dict(cmd) for cmd in c.commands]}
    if c.excluded_platforms is not None:
        d["excludedPlatforms"] = list(c.excluded_platforms)
    return d


def component_from_dict(name: str, d: Dict[str, Any]) -> Component:
    return Component(
        commands=[command_from_dict(cmd) for cmd in d.get("commands", [])],
        excluded_platforms=_excluded_platforms_from_list(name, d.get("excludedPlatforms")),
    )


def module_to_dict(m: Module) -> Dict[str, Any]:
    if isinstance(m, ComponentModule):
        d: Dict[str, Any] = {"type": m.type}
        if m.components is not None:
            d["components"] = {name: component_to_dict(c) for name, c in m.components.items()}
        return d
    if isinstance(m, NativeModule):
        return {"type": m.type, **m.spec}
    raise TypeError(f"Unsupported module type: {type(m)}")


def module_from_dict(d: Dict[str, Any]) -> Module:
    t = d.get("type")
    if t == ComponentModule.TYPE:
        components = d.get("components")
        if components is None:
            return ComponentModule()
        return ComponentModule(
            components={name: component_from_dict(name, c) for name, c in components.items()}
        )
    if t == NativeModule.TYPE:
        return NativeModule(spec={k: v for k, v in d.items() if k != "type"})
    raise SchemaFormatError(f"Unsupported module type: {t}")


def schema_to_dict(s: Schema) -> Dict[str, Any]:
    return {"modules": {name: module_to_dict(m) for name, m in s.modules.items()}}


def schema_from_dict(d: Dict[str, Any]) -> Schema:
    """
    Build a Schema from its dict form.

    Raises:
        SchemaFormatError: a required key is missing, or a module kind or
            type annotation is not recognized
    """
    try:
        modules = {name: module_from_dict(m) for name, m in d.get("modules", {}).items()}
    except KeyError as e:
        raise SchemaFormatError(f"Missing required schema key: {e}") from e
    return Schema(modules=modules)


def schema_to_json(s: Schema) -> str:
    # No sort_keys: module order is the output order.
    return json.dumps(schema_to_dict(s), indent=2)


def schema_from_json(s: str) -> Schema:
    d = json.loads(s)
    return schema_from_dict(d)


def schema_to_yaml(s: Schema) -> str:
    return yaml.safe_dump(schema_to_dict(s), sort_keys=False)


def schema_from_yaml(s: str) -> Schema:
    d = yaml.safe_load(s)
    return schema_from_dict(d or {})
