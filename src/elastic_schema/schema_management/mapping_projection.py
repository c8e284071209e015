"""Mapping flattening into logical field names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

STRUCTURAL_MARKER = "properties"


def flatten_mapping(tree: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten a nested mapping into `dotted.path -> leaf value` pairs.

    Only mapping values are descended into; lists and scalars are leaves.
    """
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        if isinstance(value, Mapping):
            for path, leaf in flatten_mapping(value, f"{prefix}{key}.").items():
                flat.setdefault(path, leaf)
        else:
            flat.setdefault(f"{prefix}{key}", value)
    return flat


def sanitize_flat_fields(flat_fields: Mapping[str, Any]) -> list[str]:
    """Reduce flattened paths to logical field names, one per path.

    The first segment is always a field name. After it, a marker segment is elided and the
    segment that follows it is appended as the next name component; that following segment
    is consumed, so a field literally named `properties` below a marker stays a name. A
    trailing marker contributes nothing. Every other segment (type, fields, analyzer, ...)
    describes the field and is dropped.
    """
    names: list[str] = []
    for flat_field in flat_fields:
        segments = flat_field.split(".")
        name = segments[0]
        position = 1
        while position < len(segments):
            if segments[position] == STRUCTURAL_MARKER and position + 1 < len(segments):
                name = f"{name}.{segments[position + 1]}"
                position += 2
                continue
            position += 1
        names.append(name)
    return names


def logical_field_names(properties: Mapping[str, Any]) -> list[str]:
    """Return the logical field names declared by a mapping `properties` tree."""
    return sanitize_flat_fields(flatten_mapping(properties))
