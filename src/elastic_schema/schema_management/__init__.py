"""Schema management exports."""

from .lookup_outcomes import FieldLookup, LookupStatus
from .mapping_projection import (
    STRUCTURAL_MARKER,
    flatten_mapping,
    logical_field_names,
    sanitize_flat_fields,
)
from .schema_builder import AnalyzerPopulator, IndexPopulator, SchemaBuilder

__all__ = [
    "AnalyzerPopulator",
    "FieldLookup",
    "IndexPopulator",
    "LookupStatus",
    "STRUCTURAL_MARKER",
    "SchemaBuilder",
    "flatten_mapping",
    "logical_field_names",
    "sanitize_flat_fields",
]
