#!/usr/bin/env python3
"""
Demo: Generate the Objective-C component view helpers header.

Builds the example schema, prints it as YAML, then prints and saves the
generated header.
"""

from componentcodegen.examples import build_example_schema
from componentcodegen.serialization import schema_to_yaml
from componentcodegen.backends import generate, save_generated_files


def main():
    schema = build_example_schema()

    print("=" * 80)
    print("COMPONENT HELPERS DEMO")
    print("=" * 80)

    print("\nSCHEMA:")
    print("-" * 80)
    print(schema_to_yaml(schema))

    files = generate("ExampleLibrary", schema)
    for file_name, text in files.items():
        print(f"\n{file_name}:")
        print("-" * 80)
        print(text)

    for path in save_generated_files(files, "generated"):
        print(f"\nSaved to: {path}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
