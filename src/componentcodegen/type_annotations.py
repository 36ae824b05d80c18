"""
Command Parameter Type Annotations

Every parameter of a view command carries exactly one type annotation,
drawn from a CLOSED set of variants:

    BooleanTypeAnnotation
    DoubleTypeAnnotation
    FloatTypeAnnotation
    Int32TypeAnnotation
    StringTypeAnnotation
    ArrayTypeAnnotation
    ReservedTypeAnnotation(name=ReservedTypeName.ROOT_TAG)

ARCHITECTURAL RULE:
    This module defines the variants only.
    How a variant is spelled in a target language belongs in backends.

    Adding a variant here without adding a row to every backend type table
    is a generator bug; backends raise UnsupportedTypeAnnotationError for it.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Union


class TypeAnnotation(ABC):
    """
    Base class for all command parameter type annotations.

    Structure only. Subclasses expose their schema tag through TYPE.
    """

    TYPE: str = ""

    @property
    def type(self) -> str:
        return self.TYPE


class ReservedTypeName(Enum):
    """Reserved (platform-provided) types a command parameter may use."""

    ROOT_TAG = "RootTag"


@dataclass(frozen=True)
class BooleanTypeAnnotation(TypeAnnotation):
    TYPE = "BooleanTypeAnnotation"


@dataclass(frozen=True)
class DoubleTypeAnnotation(TypeAnnotation):
    TYPE = "DoubleTypeAnnotation"


@dataclass(frozen=True)
class FloatTypeAnnotation(TypeAnnotation):
    TYPE = "FloatTypeAnnotation"


@dataclass(frozen=True)
class Int32TypeAnnotation(TypeAnnotation):
    TYPE = "Int32TypeAnnotation"


@dataclass(frozen=True)
class StringTypeAnnotation(TypeAnnotation):
    TYPE = "StringTypeAnnotation"


@dataclass(frozen=True)
class ArrayTypeAnnotation(TypeAnnotation):
    """Homogeneous array; elements arrive untyped at dispatch time."""

    TYPE = "ArrayTypeAnnotation"


@dataclass(frozen=True)
class ReservedTypeAnnotation(TypeAnnotation):
    """
    A reserved platform type, identified by name.

    Example:
        ReservedTypeAnnotation(ReservedTypeName.ROOT_TAG)
        is the numeric identifier of a React root view.
    """

    TYPE = "ReservedTypeAnnotation"

    name: ReservedTypeName = ReservedTypeName.ROOT_TAG


CommandParamTypeAnnotation = Union[
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    StringTypeAnnotation,
    ArrayTypeAnnotation,
    ReservedTypeAnnotation,
]

# Tag -> class, for the variants carrying no fields.
SIMPLE_TYPE_ANNOTATIONS = {
    cls.TYPE: cls
    for cls in (
        BooleanTypeAnnotation,
        DoubleTypeAnnotation,
        FloatTypeAnnotation,
        Int32TypeAnnotation,
        StringTypeAnnotation,
        ArrayTypeAnnotation,
    )
}
