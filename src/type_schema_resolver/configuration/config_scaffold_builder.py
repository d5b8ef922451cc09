"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-resolver.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Resolver configuration template for type-schema-resolver.
# Replace every <REQUIRED> placeholder before running resolve.
# Replace <OPTIONAL> placeholders only when your setup needs them.

# Root model classes as "package.module:ClassName". Every type reachable from
# a root is resolved into the same definitions document.
models:
  - "<REQUIRED>"

output:
  # yaml (default) or json.
  format: "yaml"
  # Relative paths resolve against this file; omit to print to stdout.
  # path: "<OPTIONAL>"

introspection:
  # Use class docstrings as model descriptions when api_model sets none.
  use_docstrings: true
  # Extra or replaced scalar mappings keyed by canonical type name.
  # scalar_overrides:
  #   long:
  #     type: "integer"
  #     format: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML resolver configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder resolver configuration to the requested output path.

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
        raise FileExistsError(
            f"Resolver configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
