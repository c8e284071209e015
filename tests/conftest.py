"""Shared test doubles."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import pytest
from elastic_schema.cluster_connection.connection_contract import (
    ClusterResult,
    IndexInfo,
    IndexNotFoundError,
)


class FakeConnection:
    """In-memory cluster connection recording every call it receives."""

    def __init__(
        self,
        indices: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        mapping_error: Exception | None = None,
        mapping_response: dict[str, Any] | None = None,
        failures: Mapping[str, Exception] | None = None,
        reindex_result: ClusterResult | None = None,
    ) -> None:
        self.indices: dict[str, dict[str, Any]] = {
            name: copy.deepcopy(dict(body)) for name, body in (indices or {}).items()
        }
        self.calls: list[tuple[Any, ...]] = []
        self.current_index: str | None = None
        self.prefix: str | None = None
        self.mapping_error = mapping_error
        self.mapping_response = mapping_response
        self.failures = dict(failures or {})
        self.reindex_result = reindex_result

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    def _fail_if_configured(self, name: str) -> None:
        if name in self.failures:
            raise self.failures[name]

    def set_index(self, name: str) -> str:
        self.calls.append(("set_index", name))
        resolved = f"{self.prefix}_{name}" if self.prefix else name
        self.current_index = resolved
        return resolved

    def set_index_prefix(self, value: str | None) -> None:
        self.calls.append(("set_index_prefix", value))
        self.prefix = value

    def index_exists(self, index: str) -> bool:
        self.calls.append(("index_exists", index))
        return index in self.indices

    def get_indices(
        self, include_system: bool = False, index: str | None = None
    ) -> list[IndexInfo]:
        self.calls.append(("get_indices", include_system, index))
        names = [index] if index else sorted(self.indices)
        return [
            IndexInfo.from_response(name, self.indices[name])
            for name in names
            if name in self.indices
        ]

    def index_settings(self, index: str) -> dict[str, Any]:
        self.calls.append(("index_settings", index))
        return {index: {"settings": self.indices[index].get("settings", {})}}

    def index_mappings(self, index: str) -> dict[str, Any]:
        self.calls.append(("index_mappings", index))
        if self.mapping_error is not None:
            raise self.mapping_error
        if self.mapping_response is not None:
            return self.mapping_response
        if index not in self.indices:
            raise IndexNotFoundError(f"no such index [{index}]")
        return {index: {"mappings": self.indices[index].get("mappings", {})}}

    def field_mapping(
        self, index: str, fields: str | Sequence[str], raw: bool = False
    ) -> dict[str, Any]:
        self.calls.append(("field_mapping", index, fields, raw))
        return {"index": index, "fields": fields, "raw": raw}

    def index_create(
        self, index: str, *, mappings: Mapping[str, Any], settings: Mapping[str, Any]
    ) -> None:
        self.calls.append(("index_create", index, mappings, settings))
        self._fail_if_configured("index_create")
        self.indices[index] = {"mappings": dict(mappings), "settings": dict(settings)}

    def index_modify(
        self, index: str, *, mappings: Mapping[str, Any], settings: Mapping[str, Any]
    ) -> None:
        self.calls.append(("index_modify", index, mappings, settings))
        self._fail_if_configured("index_modify")
        current = self.indices[index].setdefault("mappings", {})
        current.setdefault("properties", {}).update(mappings.get("properties", {}))

    def index_analyzer_settings(self, index: str, payload: Mapping[str, Any]) -> None:
        self.calls.append(("index_analyzer_settings", index, payload))
        self._fail_if_configured("index_analyzer_settings")

    def index_delete(self, index: str) -> bool:
        self.calls.append(("index_delete", index))
        self.indices.pop(index, None)
        return True

    def reindex(self, source: str, destination: str) -> ClusterResult:
        self.calls.append(("reindex", source, destination))
        if self.reindex_result is not None:
            return self.reindex_result
        return ClusterResult.success({"total": 3, "created": 3})

    def indices_dsl(self, method: str, params: Mapping[str, Any]) -> ClusterResult:
        self.calls.append(("indices_dsl", method, params))
        return ClusterResult.success({"acknowledged": True})


@pytest.fixture
def make_connection() -> Callable[..., FakeConnection]:
    def _factory(
        indices: Mapping[str, Mapping[str, Any]] | None = None, **options: Any
    ) -> FakeConnection:
        return FakeConnection(indices, **options)

    return _factory
