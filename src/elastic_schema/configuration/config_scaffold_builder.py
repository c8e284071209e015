"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "elastic-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Cluster configuration template for elastic-schema.
# Replace every <REQUIRED> placeholder before running any cluster command.
# Remove <OPTIONAL> entries your setup does not need.

cluster:
  # One or more node URLs (list or comma separated string).
  hosts:
    - "<REQUIRED>"
  # Basic auth: set both username and password, or neither.
  username: "<OPTIONAL>"
  password: "<OPTIONAL>"
  # API key auth cannot be combined with username/password.
  # api_key: "<OPTIONAL>"
  verify_certs: true
  # ca_certs: "<OPTIONAL>"
  request_timeout: 30
  # Prefix prepended to every index name, joined with an underscore.
  # index_prefix: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML cluster configuration template with placeholders and inline guidance."""
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
