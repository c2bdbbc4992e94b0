"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "typegen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-typegen.
# Replace every <REQUIRED> placeholder before running generate.
# Remove or fill <OPTIONAL> entries only when your setup needs them.

schema:
  # Provide either an inline schema snapshot (JSON text) or a snapshot file path.
  # Relative paths are resolved against this file's directory.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

output:
  # Destination for the generated type definitions. Omit to print to stdout.
  path: "types.ts"

generation:
  # Combine relation key types with related record types using "&" instead of "|".
  use_intersection_types: false
  # Map every collection to a single record type in the directory type, not a list.
  legacy_singular_mode: false
  # Drop "| null" from fields that are nullable but marked required.
  treat_required_as_non_null: false
  directory_type_name: "CustomDirectusTypes"

# Extra members appended to a collection's record type.
# computed_fields:
#   <collection>:
#     - name: "<OPTIONAL>"
#       type: "string | null"
#       optional: false
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
