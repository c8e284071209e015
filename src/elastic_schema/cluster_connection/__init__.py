"""Cluster connection exports."""

from .connection_contract import (
    ClusterConnection,
    ClusterOperationError,
    ClusterResult,
    IndexInfo,
    IndexNotFoundError,
)
from .elasticsearch_connection import ElasticsearchConnection

__all__ = [
    "ClusterConnection",
    "ClusterOperationError",
    "ClusterResult",
    "ElasticsearchConnection",
    "IndexInfo",
    "IndexNotFoundError",
]
