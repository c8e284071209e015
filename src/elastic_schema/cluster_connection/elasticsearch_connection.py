"""Elasticsearch client wrapper implementing the cluster connection boundary."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from elasticsearch import ApiError, Elasticsearch, NotFoundError, TransportError

from elastic_schema.configuration.runtime_settings import ClusterSettings

from .connection_contract import (
    ClusterOperationError,
    ClusterResult,
    IndexInfo,
    IndexNotFoundError,
)

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")

_NON_API_ATTRIBUTES = frozenset({"options", "perform_request"})


class ElasticsearchConnection:
    """Cluster connection backed by the official Elasticsearch client."""

    def __init__(self, client: Elasticsearch, *, index_prefix: str | None = None) -> None:
        self._client = client
        self._index_prefix = index_prefix or None
        self._current_index: str | None = None

    @classmethod
    def from_settings(cls, settings: ClusterSettings) -> ElasticsearchConnection:
        """Build a connection from validated cluster settings."""
        options: dict[str, Any] = {
            "hosts": list(settings.hosts),
            "verify_certs": settings.verify_certs,
            "request_timeout": settings.request_timeout,
        }
        if settings.basic_auth:
            options["basic_auth"] = settings.basic_auth
        if settings.api_key:
            options["api_key"] = settings.api_key
        if settings.ca_certs:
            options["ca_certs"] = str(settings.ca_certs)
        return cls(Elasticsearch(**options), index_prefix=settings.index_prefix)

    @property
    def current_index(self) -> str | None:
        return self._current_index

    @property
    def index_prefix(self) -> str | None:
        return self._index_prefix

    def set_index_prefix(self, value: str | None) -> None:
        self._index_prefix = value or None

    def set_index(self, name: str) -> str:
        """Resolve the naming convention for `name` and make it the current index."""
        self._current_index = self._resolve_index(name)
        return self._current_index

    def index_exists(self, index: str) -> bool:
        response = self._call(
            f"check index {index}", lambda: self._client.indices.exists(index=index)
        )
        return bool(response)

    def get_indices(
        self, include_system: bool = False, index: str | None = None
    ) -> list[IndexInfo]:
        """Return metadata for `index`, or for every index when no name is given."""
        expand_wildcards = "all" if include_system else "open"
        response = self._call(
            "list indices",
            lambda: self._client.indices.get(
                index=index or "*", expand_wildcards=expand_wildcards
            ),
        )
        indices: list[IndexInfo] = []
        for name, body in _body(response).items():
            if name.startswith(".") and not include_system:
                continue
            indices.append(IndexInfo.from_response(name, body))
        return indices

    def index_settings(self, index: str) -> dict[str, Any]:
        response = self._call(
            f"read settings of {index}", lambda: self._client.indices.get_settings(index=index)
        )
        return _body(response)

    def index_mappings(self, index: str) -> dict[str, Any]:
        response = self._call(
            f"read mappings of {index}", lambda: self._client.indices.get_mapping(index=index)
        )
        return _body(response)

    def field_mapping(
        self, index: str, fields: str | Sequence[str], raw: bool = False
    ) -> dict[str, Any]:
        """Return field mappings; unless `raw`, reduce them to `{full_name: mapping}`."""
        requested = [fields] if isinstance(fields, str) else list(fields)
        response = _body(
            self._call(
                f"read field mapping of {index}",
                lambda: self._client.indices.get_field_mapping(index=index, fields=requested),
            )
        )
        if raw:
            return response
        return _simplify_field_mapping(response)

    def index_create(
        self,
        index: str,
        *,
        mappings: Mapping[str, Any],
        settings: Mapping[str, Any],
    ) -> None:
        _LOGGER.info("Creating index %s.", index)
        self._call(
            f"create index {index}",
            lambda: self._client.indices.create(
                index=index,
                mappings=dict(mappings) or None,
                settings=dict(settings) or None,
            ),
        )

    def index_modify(
        self,
        index: str,
        *,
        mappings: Mapping[str, Any],
        settings: Mapping[str, Any],
    ) -> None:
        _LOGGER.info("Modifying index %s.", index)
        if mappings:
            self._call(
                f"update mappings of {index}",
                lambda: self._client.indices.put_mapping(index=index, **dict(mappings)),
            )
        if settings:
            self._call(
                f"update settings of {index}",
                lambda: self._client.indices.put_settings(index=index, settings=dict(settings)),
            )

    def index_analyzer_settings(self, index: str, payload: Mapping[str, Any]) -> None:
        """Apply an ordered analysis payload; the index is closed while settings change."""
        analysis = _group_analysis_entries(payload.get("analysis") or [])
        _LOGGER.info("Applying analysis settings to %s.", index)
        self._call(f"close index {index}", lambda: self._client.indices.close(index=index))
        try:
            self._call(
                f"update analysis of {index}",
                lambda: self._client.indices.put_settings(
                    index=index, settings={"analysis": analysis}
                ),
            )
        finally:
            self._call(f"open index {index}", lambda: self._client.indices.open(index=index))

    def index_delete(self, index: str) -> bool:
        _LOGGER.info("Deleting index %s.", index)
        response = _body(
            self._call(f"delete index {index}", lambda: self._client.indices.delete(index=index))
        )
        return bool(response.get("acknowledged", False))

    def reindex(self, source: str, destination: str) -> ClusterResult:
        source_index = self._resolve_index(source)
        destination_index = self._resolve_index(destination)
        try:
            response = self._client.reindex(
                source={"index": source_index},
                dest={"index": destination_index},
                refresh=True,
            )
        except (ApiError, TransportError) as exc:
            message = _error_text(exc)
            _LOGGER.warning("Reindex %s -> %s failed: %s", source_index, destination_index, message)
            return ClusterResult.failed(message)
        return ClusterResult.success(_body(response))

    def indices_dsl(self, method: str, params: Mapping[str, Any]) -> ClusterResult:
        """Invoke an arbitrary method of the indices API."""
        operation = getattr(self._client.indices, method, None)
        if (
            operation is None
            or method.startswith("_")
            or method in _NON_API_ATTRIBUTES
            or not callable(operation)
        ):
            return ClusterResult.failed(f"Unknown indices operation: {method}")
        try:
            response = operation(**dict(params))
        except (ApiError, TransportError) as exc:
            return ClusterResult.failed(_error_text(exc))
        return ClusterResult.success(getattr(response, "body", response))

    def _resolve_index(self, name: str) -> str:
        if not self._index_prefix:
            return name
        prefix = f"{self._index_prefix}_"
        if name.startswith(prefix):
            return name
        return prefix + name

    def _call(self, description: str, operation: Callable[[], _T]) -> _T:
        try:
            return operation()
        except NotFoundError as exc:
            raise IndexNotFoundError(f"Failed to {description}: {_error_text(exc)}") from exc
        except (ApiError, TransportError) as exc:
            raise ClusterOperationError(f"Failed to {description}: {_error_text(exc)}") from exc


def _error_text(exc: Exception) -> str:
    """Describe a client error; transport errors keep their cause in `message`."""
    if isinstance(exc, TransportError) and exc.message:
        return str(exc.message)
    return str(exc)


def _body(response: Any) -> dict[str, Any]:
    body = getattr(response, "body", response)
    if body is None:
        return {}
    return dict(body)


def _group_analysis_entries(entries: Sequence[Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
    """Convert ordered analysis entries into the engine's `{kind: {name: params}}` shape."""
    grouped: dict[str, dict[str, Any]] = {}
    for entry in entries:
        kind = entry.get("kind")
        name = entry.get("name")
        if not isinstance(kind, str) or not isinstance(name, str):
            raise ClusterOperationError(f"Malformed analysis entry: {dict(entry)}")
        grouped.setdefault(kind, {})[name] = dict(entry.get("parameters") or {})
    return grouped


def _simplify_field_mapping(response: Mapping[str, Any]) -> dict[str, Any]:
    simplified: dict[str, Any] = {}
    for index_body in response.values():
        for full_name, field_body in (index_body.get("mappings") or {}).items():
            leaf_name = full_name.rsplit(".", 1)[-1]
            mapping = field_body.get("mapping") or {}
            simplified[full_name] = mapping.get(leaf_name, mapping)
    return simplified
