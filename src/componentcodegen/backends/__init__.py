"""Backends for schema output generation (Objective-C view helpers)."""

from .component_helpers import OUTPUT_FILE_NAME, generate, save_generated_files

__all__ = ["OUTPUT_FILE_NAME", "generate", "save_generated_files"]
