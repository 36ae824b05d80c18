"""
Objective-C type table for view command parameters.

Each CommandParamTypeAnnotation variant maps to ONE row carrying four views:

    objc_type        - type spelled in the protocol method signature
    expected_kind    - class an untyped argument must be an instance of
    readable_kind    - lowercase word used in diagnostic messages
    conversion       - expression extracting a typed value from slot argN

Keeping the four views in one row means a variant can never be present in
one view and missing from another. A variant without a row is rejected with
UnsupportedTypeAnnotationError; it is never defaulted.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Type

from componentcodegen.model import Param, UnsupportedTypeAnnotationError
from componentcodegen.type_annotations import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    ReservedTypeAnnotation,
    ReservedTypeName,
    StringTypeAnnotation,
    TypeAnnotation,
)


def get_ordinal_number(num: int) -> str:
    """Return "1st", "2nd", "3rd", "Nth" up to 20, or "unknown" beyond."""
    if num == 1:
        return "1st"
    if num == 2:
        return "2nd"
    if num == 3:
        return "3rd"
    if num <= 20:
        return f"{num}th"
    return "unknown"


@dataclass(frozen=True)
class ObjCTypeMapping:
    """One row of the type table. ``conversion`` takes the slot index via {index}."""

    objc_type: str
    expected_kind: str
    readable_kind: str
    conversion: str

    def conversion_for(self, index: int) -> str:
        return self.conversion.format(index=index)


_NSNUMBER = "[NSNumber class]"

OBJC_TYPE_TABLE: Dict[Type[TypeAnnotation], ObjCTypeMapping] = {
    BooleanTypeAnnotation: ObjCTypeMapping(
        "BOOL", _NSNUMBER, "boolean", "[(NSNumber *)arg{index} boolValue]"
    ),
    DoubleTypeAnnotation: ObjCTypeMapping(
        "double", _NSNUMBER, "double", "[(NSNumber *)arg{index} doubleValue]"
    ),
    FloatTypeAnnotation: ObjCTypeMapping(
        "float", _NSNUMBER, "float", "[(NSNumber *)arg{index} floatValue]"
    ),
    Int32TypeAnnotation: ObjCTypeMapping(
        "NSInteger", _NSNUMBER, "number", "[(NSNumber *)arg{index} intValue]"
    ),
    StringTypeAnnotation: ObjCTypeMapping(
        "NSString *", "[NSString class]", "string", "(NSString *)arg{index}"
    ),
    ArrayTypeAnnotation: ObjCTypeMapping(
        "const NSArray *", "[NSArray class]", "array", "(NSArray *)arg{index}"
    ),
}

# Reserved types are keyed by name rather than by class.
OBJC_RESERVED_TYPE_TABLE: Dict[ReservedTypeName, ObjCTypeMapping] = {
    ReservedTypeName.ROOT_TAG: ObjCTypeMapping(
        "double", _NSNUMBER, "double", "[(NSNumber *)arg{index} doubleValue]"
    ),
}


def lookup_type_mapping(type_annotation: TypeAnnotation) -> ObjCTypeMapping:
    """
    Return the type table row for ``type_annotation``.

    Raises:
        UnsupportedTypeAnnotationError: no row exists for the annotation
    """
    if isinstance(type_annotation, ReservedTypeAnnotation):
        mapping = OBJC_RESERVED_TYPE_TABLE.get(type_annotation.name)
        if mapping is None:
            name = getattr(type_annotation.name, "value", type_annotation.name)
            raise UnsupportedTypeAnnotationError(
                f"{type_annotation.type}:{name}",
                f"Received invalid reserved type: {name}. {_supported_tags_hint()}",
            )
        return mapping

    mapping = OBJC_TYPE_TABLE.get(type(type_annotation))
    if mapping is None:
        tag = getattr(type_annotation, "type", None) or type(type_annotation).__name__
        raise UnsupportedTypeAnnotationError(
            tag, f"Received invalid param type annotation: {tag}. {_supported_tags_hint()}"
        )
    return mapping


def get_objc_param_type(param: Param) -> str:
    return lookup_type_mapping(param.type_annotation).objc_type


def get_objc_expected_kind_param_type(param: Param) -> str:
    return lookup_type_mapping(param.type_annotation).expected_kind


def get_readable_expected_kind_param_type(param: Param) -> str:
    return lookup_type_mapping(param.type_annotation).readable_kind


def get_objc_right_hand_assignment_param_type(param: Param, index: int) -> str:
    return lookup_type_mapping(param.type_annotation).conversion_for(index)


def supported_type_tags() -> Tuple[str, ...]:
    """Schema tags of every annotation the table can map, in table order."""
    tags = [cls.TYPE for cls in OBJC_TYPE_TABLE]
    tags.extend(f"{ReservedTypeAnnotation.TYPE}:{name.value}" for name in OBJC_RESERVED_TYPE_TABLE)
    return tuple(tags)


def _supported_tags_hint() -> str:
    return f"Supported: {', '.join(supported_type_tags())}"
