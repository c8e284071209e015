"""Analyzer blueprint collecting analysis components for one index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .analyzer_models import AnalyzerDefinition, AnalyzerKind

if TYPE_CHECKING:
    from elastic_schema.cluster_connection.connection_contract import ClusterConnection

_LOGGER = logging.getLogger(__name__)


class AnalyzerBlueprint:
    """Ordered, caller-populated list of analysis definitions for a target index.

    Declaration order is preserved through serialization because analyzers refer to
    tokenizers and filters declared before them.
    """

    def __init__(self, index_name: str) -> None:
        self._index_name = index_name
        self._definitions: list[AnalyzerDefinition] = []

    @property
    def index_name(self) -> str:
        return self._index_name

    @property
    def definitions(self) -> tuple[AnalyzerDefinition, ...]:
        return tuple(self._definitions)

    def analyzer(self, name: str) -> AnalyzerDefinition:
        return self._add_definition(AnalyzerKind.ANALYZER, name)

    def tokenizer(self, type_name: str) -> AnalyzerDefinition:
        return self._add_definition(AnalyzerKind.TOKENIZER, type_name)

    def char_filter(self, type_name: str) -> AnalyzerDefinition:
        return self._add_definition(AnalyzerKind.CHAR_FILTER, type_name)

    def filter(self, type_name: str) -> AnalyzerDefinition:
        return self._add_definition(AnalyzerKind.FILTER, type_name)

    def serialize(self) -> dict[str, list[dict[str, Any]]]:
        """Return the `analysis` payload in declaration order."""
        return {"analysis": [definition.to_payload() for definition in self._definitions]}

    def build(self, connection: ClusterConnection) -> bool:
        """Apply the collected definitions to the target index.

        The index is always selected on the connection. The settings call is only issued
        when at least one definition was declared. The returned flag marks completion of
        the build step; failures are signalled by the connection itself.
        """
        index = connection.set_index(self._index_name)
        if not self._definitions:
            _LOGGER.debug("No analysis definitions declared for %s; nothing to apply.", index)
            return True
        _LOGGER.debug("Applying %d analysis definitions to %s.", len(self._definitions), index)
        connection.index_analyzer_settings(index, self.serialize())
        return True

    def _add_definition(self, kind: AnalyzerKind, name: str) -> AnalyzerDefinition:
        definition = AnalyzerDefinition(kind, name)
        self._definitions.append(definition)
        return definition
