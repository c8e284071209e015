"""Schema builder orchestrating index lifecycle operations on a cluster connection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from elastic_schema.analysis.analyzer_blueprint import AnalyzerBlueprint
from elastic_schema.cluster_connection.connection_contract import (
    ClusterConnection,
    ClusterResult,
    IndexInfo,
    IndexNotFoundError,
)
from elastic_schema.index_structure.index_blueprint import IndexBlueprint

from .lookup_outcomes import FieldLookup
from .mapping_projection import logical_field_names

_LOGGER = logging.getLogger(__name__)

IndexPopulator = Callable[[IndexBlueprint], None]
AnalyzerPopulator = Callable[[AnalyzerBlueprint], None]


class SchemaBuilder:
    """Create, modify, delete and introspect indexes through one cluster connection.

    The builder keeps no index metadata between calls. Every operation that targets an
    index selects it on the connection first and passes the resolved name on, so the
    connection's current index always matches the call being served.

    Existence and introspection queries answer "absent" with `None`/`False` instead of
    raising; structural operations let connection failures propagate.
    """

    def __init__(self, connection: ClusterConnection) -> None:
        self._connection = connection

    @property
    def connection(self) -> ClusterConnection:
        return self._connection

    def override_prefix(self, value: str | None) -> SchemaBuilder:
        self._connection.set_index_prefix(value)
        return self

    # Index metadata

    def get_settings(self, name: str) -> dict[str, Any]:
        index = self._connection.set_index(name)
        return self._connection.index_settings(index)

    def get_index(self, name: str) -> IndexInfo | None:
        """Return index metadata, or `None` when the index does not exist."""
        if not self.has_index(name):
            return None
        index = self._connection.set_index(name)
        matches = self._connection.get_indices(False, index=index)
        for info in matches:
            if info.name == index:
                return info
        # An alias resolves to differently named concrete indexes.
        return matches[0] if matches else None

    def has_index(self, name: str) -> bool:
        index = self._connection.set_index(name)
        return self._connection.index_exists(index)

    def get_indices(self, include_system: bool = False) -> list[IndexInfo]:
        return self._connection.get_indices(include_system)

    # Structural operations

    def create(self, name: str, populate: IndexPopulator) -> IndexInfo | None:
        blueprint = IndexBlueprint(name)
        populate(blueprint)
        blueprint.build_create(self._connection)
        return self.get_index(name)

    def create_if_not_exists(self, name: str, populate: IndexPopulator) -> IndexInfo | None:
        if self.has_index(name):
            _LOGGER.debug("Index %s already exists; skipping create.", name)
            return self.get_index(name)
        return self.create(name, populate)

    def modify(self, name: str, populate: IndexPopulator) -> IndexInfo | None:
        blueprint = IndexBlueprint(name)
        populate(blueprint)
        blueprint.build_modify(self._connection)
        return self.get_index(name)

    def delete(self, name: str) -> bool:
        index = self._connection.set_index(name)
        return self._connection.index_delete(index)

    def delete_if_exists(self, name: str) -> bool:
        index = self._connection.set_index(name)
        if not self._connection.index_exists(index):
            _LOGGER.debug("Index %s does not exist; nothing to delete.", index)
            return False
        return self._connection.index_delete(index)

    def reindex(self, source: str, destination: str) -> ClusterResult:
        return self._connection.reindex(source, destination)

    def set_analyser(self, name: str, populate: AnalyzerPopulator) -> IndexInfo | None:
        blueprint = AnalyzerBlueprint(name)
        populate(blueprint)
        blueprint.build(self._connection)
        return self.get_index(name)

    def dsl(self, method: str, params: Mapping[str, Any]) -> ClusterResult:
        """Forward an arbitrary index-admin operation to the connection."""
        return self._connection.indices_dsl(method, params)

    # Mapping introspection

    def get_mappings(self, name: str) -> dict[str, Any]:
        index = self._connection.set_index(name)
        return self._connection.index_mappings(index)

    def get_field_mapping(
        self, name: str, field: str | Sequence[str], raw: bool = False
    ) -> dict[str, Any]:
        index = self._connection.set_index(name)
        return self._connection.field_mapping(index, field, raw)

    def lookup_fields(self, name: str) -> FieldLookup:
        """Fetch the index mapping and reduce it to logical field names.

        Never raises: a missing index, an unreachable cluster and an unexpected mapping
        shape each produce a distinct unavailable status.
        """
        index = self._connection.set_index(name)
        try:
            mappings = self._connection.index_mappings(index)
        except IndexNotFoundError:
            return FieldLookup.not_found(index)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            _LOGGER.debug("Mapping fetch for %s failed: %s", index, exc)
            return FieldLookup.boundary_failure(index, exc)

        try:
            index_mapping = mappings[index]["mappings"]
            if not index_mapping:
                return FieldLookup.found(index, ())
            names = logical_field_names(index_mapping["properties"])
        except (KeyError, TypeError, AttributeError) as exc:
            _LOGGER.debug("Mapping of %s has an unexpected shape: %r", index, exc)
            return FieldLookup.malformed(index, exc)
        return FieldLookup.found(index, names)

    def has_field(self, name: str, field: str) -> bool:
        return self.lookup_fields(name).contains(field)

    def has_fields(self, name: str, fields: Iterable[str]) -> bool:
        return self.lookup_fields(name).contains_all(fields)
