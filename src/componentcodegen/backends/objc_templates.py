"""
Text templates for the Objective-C component view helpers header.

Each template is a pure function of keyword-only fields returning a
stripped fragment. Fragments nest:

    convert-arg -> command if-case -> command handler --+
                                       protocol --------+-> file

Whitespace inside the templates is part of the output contract: the header
is byte-compared by downstream tooling, so do not reformat these strings.
"""

from typing import Iterable, Optional


def join_fragments(fragments: Iterable[Optional[str]], separator: str = "\n\n") -> str:
    """Join fragments with ``separator``, skipping absent (None) ones, and strip."""
    return separator.join(f for f in fragments if f is not None).strip()


def protocol_template(*, component_name: str, methods: str) -> str:
    return f"""
@protocol RCT{component_name}ViewProtocol <NSObject>
{methods}
@end
""".strip()


def command_handler_if_case_convert_arg_template(
    *,
    component_name: str,
    expected_kind: str,
    arg_number: int,
    arg_number_string: str,
    expected_kind_string: str,
    arg_conversion: str,
) -> str:
    return f"""
  NSObject *arg{arg_number} = args[{arg_number}];
#if RCT_DEBUG
  if (!RCTValidateTypeOfViewCommandArgument(arg{arg_number}, {expected_kind}, @"{expected_kind_string}", @"{component_name}", commandName, @"{arg_number_string}")) {{
    return;
  }}
#endif
  {arg_conversion}
""".strip()


def command_handler_if_case_template(
    *,
    component_name: str,
    command_name: str,
    num_args: int,
    convert_args: str,
    command_call: str,
) -> str:
    return f"""
if ([commandName isEqualToString:@"{command_name}"]) {{
#if RCT_DEBUG
  if ([args count] != {num_args}) {{
    RCTLogError(@"%@ command %@ received %d arguments, expected %d.", @"{component_name}", commandName, (int)[args count], {num_args});
    return;
  }}
#endif

  {convert_args}

  {command_call}
  return;
}}
""".strip()


def command_handler_template(*, component_name: str, if_cases: str) -> str:
    return f"""
RCT_EXTERN inline void RCT{component_name}HandleCommand(
  id<RCT{component_name}ViewProtocol> componentView,
  NSString const *commandName,
  NSArray const *args)
{{
  {if_cases}

#if RCT_DEBUG
  RCTLogError(@"%@ received command %@, which is not a supported command.", @"{component_name}", commandName);
#endif
}}
""".strip()


# Split so this source file is not itself mistaken for generated output.
GENERATED_MARKER = "@" + "generated"


def file_template(*, component_content: str) -> str:
    return f"""
/**
* This code was generated by componentcodegen.
*
* Do not edit this file as changes may cause incorrect behavior and will be lost
* once the code is regenerated.
*
* {GENERATED_MARKER} by codegen project: component_helpers.py
*/

#import <Foundation/Foundation.h>
#import <React/RCTDefines.h>
#import <React/RCTLog.h>

NS_ASSUME_NONNULL_BEGIN

{component_content}

NS_ASSUME_NONNULL_END
""".strip()
