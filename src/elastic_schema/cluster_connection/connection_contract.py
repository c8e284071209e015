"""Cluster connection boundary contracts."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class ClusterOperationError(Exception):
    """Raised when the cluster rejects or cannot complete an index operation."""


class IndexNotFoundError(ClusterOperationError):
    """Raised when the targeted index does not exist."""


@dataclass(frozen=True)
class IndexInfo:
    """Metadata of one index as reported by the cluster."""

    name: str
    aliases: Mapping[str, Any] = field(default_factory=dict)
    mappings: Mapping[str, Any] = field(default_factory=dict)
    settings: Mapping[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_response(name: str, body: Mapping[str, Any]) -> IndexInfo:
        return IndexInfo(
            name=name,
            aliases=dict(body.get("aliases") or {}),
            mappings=dict(body.get("mappings") or {}),
            settings=dict(body.get("settings") or {}),
        )


@dataclass(frozen=True)
class ClusterResult:
    """Outcome of a forwarded cluster operation."""

    data: Any
    error_message: str | None

    @property
    def succeeded(self) -> bool:
        return self.error_message is None

    @staticmethod
    def success(data: Any) -> ClusterResult:
        return ClusterResult(data=data, error_message=None)

    @staticmethod
    def failed(error: Exception | str) -> ClusterResult:
        return ClusterResult(data=None, error_message=str(error))


class ClusterConnection(Protocol):
    """Cluster capability consumed by the schema layer.

    `set_index` resolves naming conventions and records the current index; every other
    index-targeted method receives the resolved name explicitly.
    """

    @property
    def current_index(self) -> str | None: ...

    def set_index(self, name: str) -> str: ...

    def set_index_prefix(self, value: str | None) -> None: ...

    def index_exists(self, index: str) -> bool: ...

    def get_indices(
        self, include_system: bool = False, index: str | None = None
    ) -> list[IndexInfo]: ...

    def index_settings(self, index: str) -> dict[str, Any]: ...

    def index_mappings(self, index: str) -> dict[str, Any]: ...

    def field_mapping(
        self, index: str, fields: str | Sequence[str], raw: bool = False
    ) -> dict[str, Any]: ...

    def index_create(
        self,
        index: str,
        *,
        mappings: Mapping[str, Any],
        settings: Mapping[str, Any],
    ) -> None: ...

    def index_modify(
        self,
        index: str,
        *,
        mappings: Mapping[str, Any],
        settings: Mapping[str, Any],
    ) -> None: ...

    def index_analyzer_settings(self, index: str, payload: Mapping[str, Any]) -> None: ...

    def index_delete(self, index: str) -> bool: ...

    def reindex(self, source: str, destination: str) -> ClusterResult: ...

    def indices_dsl(self, method: str, params: Mapping[str, Any]) -> ClusterResult: ...
