"""
Objective-C component view helpers generator.

Converts a Schema into a single header, RCTComponentViewHelpers.h, holding
for every iOS component:
    - RCT<Name>ViewProtocol: one method per command
    - RCT<Name>HandleCommand: dispatch from (command name, untyped args)
      to the typed protocol method, with debug-only argument checks

LABEL PARITY:
    The first param of a command is unlabeled; every later param is
    labeled with its own name. Protocol signatures and generated call
    sites follow the same rule, so they always agree.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from componentcodegen.model import (
    Command,
    Component,
    ComponentModule,
    Module,
    Param,
    Platform,
    Schema,
)
from componentcodegen.backends.objc_types import (
    get_objc_expected_kind_param_type,
    get_objc_param_type,
    get_objc_right_hand_assignment_param_type,
    get_ordinal_number,
    get_readable_expected_kind_param_type,
)
from componentcodegen.backends.objc_templates import (
    command_handler_if_case_convert_arg_template,
    command_handler_if_case_template,
    command_handler_template,
    file_template,
    join_fragments,
    protocol_template,
)


TARGET_PLATFORM = Platform.IOS
OUTPUT_FILE_NAME = "RCTComponentViewHelpers.h"

FilesOutput = Dict[str, str]


def _param_label(param: Param, index: int) -> str:
    return "" if index == 0 else param.name


def generate_protocol(component: Component, component_name: str) -> str:
    """Build the protocol declaring one method per command."""
    method_lines = []
    for command in component.commands:
        param_string = " ".join(
            f"{_param_label(param, index)}:({get_objc_param_type(param)}){param.name}"
            for index, param in enumerate(command.params)
        )
        method_lines.append(f"- (void){command.name}{param_string};")

    return protocol_template(
        component_name=component_name,
        methods="\n".join(method_lines).strip(),
    )


def generate_convert_and_validate_param(param: Param, index: int, component_name: str) -> str:
    left_side_type = get_objc_param_type(param)
    right_side = get_objc_right_hand_assignment_param_type(param, index)

    return command_handler_if_case_convert_arg_template(
        component_name=component_name,
        expected_kind=get_objc_expected_kind_param_type(param),
        arg_number=index,
        arg_number_string=get_ordinal_number(index + 1),
        expected_kind_string=get_readable_expected_kind_param_type(param),
        arg_conversion=f"{left_side_type} {param.name} = {right_side};",
    )


def generate_command_if_case(command: Command, component_name: str) -> str:
    """Build the dispatch branch for one command."""
    convert_args = join_fragments(
        generate_convert_and_validate_param(param, index, component_name)
        for index, param in enumerate(command.params)
    )

    command_call_args = " ".join(
        f"{_param_label(param, index)}:{param.name}"
        for index, param in enumerate(command.params)
    )
    command_call = f"[componentView {command.name}{command_call_args}];"

    return command_handler_if_case_template(
        component_name=component_name,
        command_name=command.name,
        num_args=len(command.params),
        convert_args=convert_args,
        command_call=command_call,
    )


def generate_command_handler(component: Component, component_name: str) -> Optional[str]:
    """Build the dispatch function, or None when there is nothing to dispatch."""
    if not component.commands:
        return None

    if_cases = "\n\n".join(
        generate_command_if_case(command, component_name)
        for command in component.commands
    )
    return command_handler_template(component_name=component_name, if_cases=if_cases)


def generate_component(component: Component, component_name: str) -> str:
    return join_fragments([
        generate_protocol(component, component_name),
        generate_command_handler(component, component_name),
    ])


# =========================================================================
# SCHEMA WALK
# =========================================================================

ModulePredicate = Callable[[str, Module], bool]
ComponentPredicate = Callable[[str, Component], bool]


def _is_component_module(module_name: str, module: Module) -> bool:
    return isinstance(module, ComponentModule)


def _has_component_map(module_name: str, module: Module) -> bool:
    return module.components is not None


def _is_generated_on_target(component_name: str, component: Component) -> bool:
    return not component.is_excluded_on(TARGET_PLATFORM)


# Applied in order; later predicates may rely on earlier ones having passed.
MODULE_PREDICATES: Tuple[ModulePredicate, ...] = (_is_component_module, _has_component_map)
COMPONENT_PREDICATES: Tuple[ComponentPredicate, ...] = (_is_generated_on_target,)


def _select_modules(schema: Schema) -> List[Tuple[str, ComponentModule]]:
    return [
        (name, module)
        for name, module in schema.modules.items()
        if all(predicate(name, module) for predicate in MODULE_PREDICATES)
    ]


def _select_components(module: ComponentModule) -> List[Tuple[str, Component]]:
    return [
        (name, component)
        for name, component in module.components.items()
        if all(predicate(name, component) for predicate in COMPONENT_PREDICATES)
    ]


def generate_module(module: ComponentModule) -> str:
    """Generate every target component of one module, blank-line separated."""
    return "\n\n".join(
        generate_component(component, component_name)
        for component_name, component in _select_components(module)
    )


def generate(
    library_name: str,
    schema: Schema,
    package_name: Optional[str] = None,
    assume_nonnull: bool = False,
    header_prefix: Optional[str] = None,
) -> FilesOutput:
    """
    Generate the component view helpers header for a schema.

    Args:
        library_name: Library being generated (accepted, unused)
        schema: Schema to generate from; never modified
        package_name: Accepted for parity with sibling generators, unused
        assume_nonnull: Accepted for parity with sibling generators, unused
        header_prefix: Accepted for parity with sibling generators, unused

    Returns:
        Single-entry mapping: OUTPUT_FILE_NAME -> header text

    Raises:
        UnsupportedTypeAnnotationError: a param type has no Objective-C mapping
    """
    module_contents = (generate_module(module) for _, module in _select_modules(schema))
    component_content = "\n\n".join(content for content in module_contents if content)

    return {OUTPUT_FILE_NAME: file_template(component_content=component_content)}


def save_generated_files(files: FilesOutput, output_dir: Union[str, Path]) -> List[Path]:
    """
    Write generated files under ``output_dir``.

    Args:
        files: Mapping of file name to text, as returned by ``generate``
        output_dir: Destination directory (created if missing)

    Returns:
        Paths written, in mapping order
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for file_name, text in files.items():
        path = out / file_name
        with open(path, 'w') as f:
            f.write(text)
        written.append(path)
    return written


__all__ = [
    "OUTPUT_FILE_NAME",
    "TARGET_PLATFORM",
    "generate",
    "generate_command_handler",
    "generate_command_if_case",
    "generate_component",
    "generate_convert_and_validate_param",
    "generate_module",
    "generate_protocol",
    "save_generated_files",
]
