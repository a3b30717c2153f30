"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemagen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema generation configuration for record-jsonschema.
# Replace every <REQUIRED> placeholder before running `record-jsonschema run`.
# Remove <OPTIONAL> entries you do not need.

# Directory for generated schema files, relative to this file.
output_dir: "schemas"
# JSON indentation width.
indent: 2

targets:
  # Dataclass to render, as package.module:ClassName.
  - type: "<REQUIRED>"
    # Defaults to <ClassName>.schema.json inside output_dir.
    output: "<OPTIONAL>"

metadata:
  # Description and format overrides, keyed by package.module:ClassName.
  # Entries here take priority over dataclasses.field(metadata=...) values.
  "<OPTIONAL>":
    description: "<OPTIONAL>"
    fields:
      field_name:
        description: "<OPTIONAL>"
        # JSON Schema format hint such as email, date-time or uuid.
        format: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
