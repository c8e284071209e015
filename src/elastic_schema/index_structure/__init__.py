"""Index structure exports."""

from .field_models import BlueprintError, FieldDefinition
from .index_blueprint import IndexBlueprint

__all__ = [
    "BlueprintError",
    "FieldDefinition",
    "IndexBlueprint",
]
