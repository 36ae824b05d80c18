"""
Example schema builders.

Builds a small component library covering every command param type, a
component without commands, an Android-only component and a native module,
enough to exercise every branch of the generators.
"""
from componentcodegen.model import (
    Command,
    Component,
    ComponentModule,
    NativeModule,
    Param,
    Schema,
)
from componentcodegen.type_annotations import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    ReservedTypeAnnotation,
    ReservedTypeName,
    StringTypeAnnotation,
)


def build_toggle_component() -> Component:
    return Component(
        commands=[
            Command(
                name="setValue",
                params=[Param(name="value", type_annotation=BooleanTypeAnnotation())],
            ),
        ],
        excluded_platforms=["android"],
    )


def build_map_component() -> Component:
    # One command per shape: no params, several params, every type tag.
    return Component(
        commands=[
            Command(name="reset"),
            Command(
                name="animateToRegion",
                params=[
                    Param(name="latitude", type_annotation=DoubleTypeAnnotation()),
                    Param(name="longitude", type_annotation=DoubleTypeAnnotation()),
                    Param(name="duration", type_annotation=Int32TypeAnnotation()),
                ],
            ),
            Command(
                name="configure",
                params=[
                    Param(name="zoom", type_annotation=FloatTypeAnnotation()),
                    Param(name="title", type_annotation=StringTypeAnnotation()),
                    Param(name="markers", type_annotation=ArrayTypeAnnotation()),
                    Param(name="animated", type_annotation=BooleanTypeAnnotation()),
                    Param(
                        name="rootTag",
                        type_annotation=ReservedTypeAnnotation(ReservedTypeName.ROOT_TAG),
                    ),
                ],
            ),
        ],
    )


def build_example_schema() -> Schema:
    return Schema(
        modules={
            "ToggleNativeComponent": ComponentModule(
                components={"Toggle": build_toggle_component()},
            ),
            "NativeClipboard": NativeModule(spec={"moduleName": "Clipboard"}),
            "MapNativeComponent": ComponentModule(
                components={
                    "MapView": build_map_component(),
                    "MapOverlay": Component(),
                    "AndroidRipple": Component(
                        commands=[Command(name="hotspotUpdate")],
                        excluded_platforms=["iOS"],
                    ),
                },
            ),
            "EmptyNativeComponent": ComponentModule(),
        },
    )
