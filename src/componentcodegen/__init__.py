"""
Component Codegen Package

Generates native view-command glue from a language-agnostic schema of
UI components and the commands they expose.

ARCHITECTURAL GUARANTEE:
------------------------
The schema model (model, type_annotations) contains ZERO knowledge of:
    - Objective-C spelling of types
    - Header layout or templates
    - Target platform conventions

Everything target-specific lives in `componentcodegen.backends`.
All backends consume the schema model unchanged.
"""

__version__ = "0.1.0"
