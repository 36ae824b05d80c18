"""
Core Schema Model Objects

Defines the data structures a codegen schema is made of:
    - Params (named, typed command arguments)
    - Commands (remote-invocable operations on a view)
    - Components (UI elements exposing commands)
    - Modules (component modules, native modules)
    - Schema (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about Objective-C or any other target language
        - Are immutable (frozen dataclasses)
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .type_annotations import CommandParamTypeAnnotation


class CodegenError(Exception):
    """Base class for errors raised while generating code from a schema."""
    pass


class UnsupportedTypeAnnotationError(CodegenError):
    """Raised when a type annotation has no row in a backend type table."""

    def __init__(self, type_tag: str, message: Optional[str] = None):
        super().__init__(message or f"Received invalid param type annotation: {type_tag}")
        self.type_tag = type_tag


class SchemaFormatError(CodegenError):
    """Raised when a serialized schema cannot be converted to model objects."""
    pass


class Platform(Enum):
    """Target platforms a component may be excluded from."""
    IOS = "iOS"
    ANDROID = "android"


@dataclass(frozen=True)
class Param:
    """
    A named, typed command parameter.

    Properties:
        name:
            Unique within its command. Doubles as the argument label in
            generated method signatures and call sites.

        type_annotation:
            One of the closed set of CommandParamTypeAnnotation variants.

        optional:
            Carried through from the schema; generation ignores it.
    """

    name: str
    type_annotation: CommandParamTypeAnnotation
    optional: bool = False


@dataclass(frozen=True)
class Command:
    """
    A remote-invocable operation on a component instance.

    INVARIANT:
        Param order is load-bearing. It fixes the protocol argument order
        AND the positional slot each argument is read from at dispatch.
    """

    name: str
    params: List[Param] = field(default_factory=list)
    optional: bool = False

    def get_param(self, param_name: str) -> Optional[Param]:
        for param in self.params:
            if param.name == param_name:
                return param
        return None


@dataclass(frozen=True)
class Component:
    """
    A UI element definition.

    The component name is the key it is stored under in its module's
    component map; it is not repeated here.

    Properties:
        commands:
            Ordered commands the component exposes (may be empty)

        excluded_platforms:
            Platforms the component must not be generated for.
            None and [] both mean "generate everywhere".
    """

    commands: List[Command] = field(default_factory=list)
    excluded_platforms: Optional[List[str]] = None

    def get_command(self, command_name: str) -> Optional[Command]:
        for command in self.commands:
            if command.name == command_name:
                return command
        return None

    def is_excluded_on(self, platform: Union[Platform, str]) -> bool:
        """Return True if this component is excluded on ``platform``."""
        if not self.excluded_platforms:
            return False
        value = platform.value if isinstance(platform, Platform) else platform
        return value in self.excluded_platforms


@dataclass(frozen=True)
class ComponentModule:
    """
    A module declaring UI components.

    ``components`` may be None for a module that declares none.
    """

    TYPE = "Component"

    components: Optional[Dict[str, Component]] = None

    @property
    def type(self) -> str:
        return self.TYPE

    def get_component(self, component_name: str) -> Optional[Component]:
        if self.components is None:
            return None
        return self.components.get(component_name)


@dataclass(frozen=True)
class NativeModule:
    """
    A non-component module.

    Component generators ignore it; the raw spec is kept only so that a
    schema survives a serialization round trip.
    """

    TYPE = "NativeModule"

    spec: Dict[str, object] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.TYPE


Module = Union[ComponentModule, NativeModule]


@dataclass(frozen=True)
class Schema:
    """
    Root container: every module of a library, keyed by module name.

    INVARIANTS:
        - Module order is significant; it is the output order.
        - Schema objects are read-only input to generators.
    """

    modules: Dict[str, Module] = field(default_factory=dict)

    def get_module(self, module_name: str) -> Optional[Module]:
        return self.modules.get(module_name)

    def iter_components(self) -> Iterator[Tuple[str, str, Component]]:
        """
        Yield (module_name, component_name, component) in schema order.

        Modules with no component map are skipped. No platform filtering
        happens here.
        """
        for module_name, module in self.modules.items():
            if not isinstance(module, ComponentModule) or module.components is None:
                continue
            for component_name, component in module.components.items():
                yield module_name, component_name, component
