"""Index field entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class BlueprintError(Exception):
    """Raised for invalid index field declarations."""


@dataclass
class FieldDefinition:
    """One declared field with its mapping parameters."""

    name: str
    field_type: str
    parameters: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, FieldDefinition] = field(default_factory=dict)
    sub_fields: dict[str, FieldDefinition] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> FieldDefinition:
        self.parameters[key] = value
        return self

    def analyzer(self, name: str) -> FieldDefinition:
        return self.set("analyzer", name)

    def search_analyzer(self, name: str) -> FieldDefinition:
        return self.set("search_analyzer", name)

    def format(self, value: str) -> FieldDefinition:
        return self.set("format", value)

    def index(self, enabled: bool) -> FieldDefinition:
        return self.set("index", enabled)

    def copy_to(self, *targets: str) -> FieldDefinition:
        return self.set("copy_to", list(targets))

    def to_mapping(self) -> dict[str, Any]:
        mapping: dict[str, Any] = {"type": self.field_type, **self.parameters}
        if self.properties:
            mapping["properties"] = {
                name: child.to_mapping() for name, child in self.properties.items()
            }
        if self.sub_fields:
            mapping["fields"] = {
                name: child.to_mapping() for name, child in self.sub_fields.items()
            }
        return mapping
