"""Analysis pipeline entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnalyzerKind(str, Enum):
    """Component kind inside an index analysis pipeline."""

    ANALYZER = "analyzer"
    TOKENIZER = "tokenizer"
    CHAR_FILTER = "char_filter"
    FILTER = "filter"


@dataclass
class AnalyzerDefinition:
    """One named analysis component plus its engine-specific parameters."""

    _kind: AnalyzerKind
    name: str
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> AnalyzerKind:
        return self._kind

    def set(self, key: str, value: Any) -> AnalyzerDefinition:
        self.parameters[key] = value
        return self

    def update(self, **parameters: Any) -> AnalyzerDefinition:
        self.parameters.update(parameters)
        return self

    def type(self, value: str) -> AnalyzerDefinition:
        return self.set("type", value)

    def tokenizer(self, value: str) -> AnalyzerDefinition:
        return self.set("tokenizer", value)

    def filters(self, *names: str) -> AnalyzerDefinition:
        return self.set("filter", list(names))

    def char_filters(self, *names: str) -> AnalyzerDefinition:
        return self.set("char_filter", list(names))

    def to_payload(self) -> dict[str, Any]:
        """Project the definition into its serialized analysis entry."""
        return {
            "kind": self._kind.value,
            "name": self.name,
            "parameters": dict(self.parameters),
        }
