"""Structural blueprint describing index fields and index-level settings."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .field_models import BlueprintError, FieldDefinition

if TYPE_CHECKING:
    from elastic_schema.cluster_connection.connection_contract import ClusterConnection

_LOGGER = logging.getLogger(__name__)

_OBJECT_TYPES = frozenset({"object", "nested"})


class IndexBlueprint:
    """Caller-populated description of an index's fields.

    Declaring a field name twice with a different type adds a multi-field named after the
    second type, so `text("title")` followed by `keyword("title")` maps `title` as text with
    a `title.keyword` sub-field.
    """

    def __init__(self, index_name: str) -> None:
        self._index_name = index_name
        self._fields: dict[str, FieldDefinition] = {}
        self._settings: dict[str, Any] = {}

    @property
    def index_name(self) -> str:
        return self._index_name

    @property
    def fields(self) -> tuple[FieldDefinition, ...]:
        return tuple(self._fields.values())

    def field(self, field_type: str, name: str, **parameters: Any) -> FieldDefinition:
        if not name or not name.strip():
            raise BlueprintError("Field name must not be empty.")
        if "." in name:
            raise BlueprintError(
                f"Field name '{name}' must not contain dots; declare an object field instead."
            )
        existing = self._fields.get(name)
        if existing is None:
            definition = FieldDefinition(name=name, field_type=field_type, parameters=parameters)
            self._fields[name] = definition
            return definition
        if existing.field_type == field_type:
            existing.parameters.update(parameters)
            return existing
        if existing.field_type in _OBJECT_TYPES or field_type in _OBJECT_TYPES:
            raise BlueprintError(
                f"Field '{name}' cannot be redeclared as {field_type}; "
                f"it is already declared as {existing.field_type}."
            )
        sub_field = existing.sub_fields.get(field_type)
        if sub_field is not None:
            sub_field.parameters.update(parameters)
            return sub_field
        sub_field = FieldDefinition(name=field_type, field_type=field_type, parameters=parameters)
        existing.sub_fields[field_type] = sub_field
        return sub_field

    def text(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("text", name, **parameters)

    def keyword(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("keyword", name, **parameters)

    def integer(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("integer", name, **parameters)

    def long(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("long", name, **parameters)

    def float(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("float", name, **parameters)

    def double(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("double", name, **parameters)

    def boolean(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("boolean", name, **parameters)

    def date(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("date", name, **parameters)

    def geo_point(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("geo_point", name, **parameters)

    def ip(self, name: str, **parameters: Any) -> FieldDefinition:
        return self.field("ip", name, **parameters)

    def nested(
        self, name: str, populate: Callable[[IndexBlueprint], None] | None = None
    ) -> FieldDefinition:
        return self._object_field("nested", name, populate)

    def object(
        self, name: str, populate: Callable[[IndexBlueprint], None] | None = None
    ) -> FieldDefinition:
        return self._object_field("object", name, populate)

    def settings(self, key: str, value: Any) -> IndexBlueprint:
        self._settings[key] = value
        return self

    def shards(self, count: int) -> IndexBlueprint:
        return self.settings("number_of_shards", count)

    def replicas(self, count: int) -> IndexBlueprint:
        return self.settings("number_of_replicas", count)

    def to_mappings(self) -> dict[str, Any]:
        if not self._fields:
            return {}
        return {"properties": {name: field.to_mapping() for name, field in self._fields.items()}}

    def to_settings(self) -> dict[str, Any]:
        return dict(self._settings)

    def build_create(self, connection: ClusterConnection) -> None:
        index = connection.set_index(self._index_name)
        _LOGGER.debug("Creating %s with %d top-level fields.", index, len(self._fields))
        connection.index_create(index, mappings=self.to_mappings(), settings=self.to_settings())

    def build_modify(self, connection: ClusterConnection) -> None:
        index = connection.set_index(self._index_name)
        _LOGGER.debug("Modifying %s with %d top-level fields.", index, len(self._fields))
        connection.index_modify(index, mappings=self.to_mappings(), settings=self.to_settings())

    def _object_field(
        self,
        field_type: str,
        name: str,
        populate: Callable[[IndexBlueprint], None] | None,
    ) -> FieldDefinition:
        definition = self.field(field_type, name)
        if populate is not None:
            child = IndexBlueprint(f"{self._index_name}.{name}")
            populate(child)
            definition.properties.update({field.name: field for field in child.fields})
        return definition
