"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ClusterSettings, Configuration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    cluster = _parse_cluster_section(parsed.get("cluster"), path.parent)
    return Configuration(path=path, cluster=cluster)


def _parse_cluster_section(value: Any, base_path: Path) -> ClusterSettings:
    section = _require_mapping(value, "cluster")
    hosts = _normalize_hosts(section.get("hosts"))
    username = _optional_string(section.get("username"), "cluster.username")
    password = _optional_string(section.get("password"), "cluster.password")
    api_key = _optional_string(section.get("api_key"), "cluster.api_key")
    if (username is None) != (password is None):
        raise ConfigurationError("cluster.username and cluster.password must be set together.")
    if api_key and username:
        raise ConfigurationError("cluster.api_key must not be combined with username/password.")

    verify_certs = section.get("verify_certs", True)
    if not isinstance(verify_certs, bool):
        raise ConfigurationError("cluster.verify_certs must be a boolean.")
    ca_certs_raw = _optional_string(section.get("ca_certs"), "cluster.ca_certs")
    ca_certs = _resolve_path(base_path, ca_certs_raw) if ca_certs_raw else None
    if ca_certs is not None and not ca_certs.exists():
        raise ConfigurationError(f"CA certificate file not found: {ca_certs}")

    request_timeout = _require_positive_int(
        section.get("request_timeout", 30), "cluster.request_timeout"
    )
    index_prefix = _optional_string(section.get("index_prefix"), "cluster.index_prefix")
    return ClusterSettings(
        hosts=hosts,
        username=username,
        password=password,
        api_key=api_key,
        verify_certs=verify_certs,
        ca_certs=ca_certs,
        request_timeout=request_timeout,
        index_prefix=index_prefix,
    )


def _normalize_hosts(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("cluster.hosts is required.")
    hosts: list[str] = []
    if isinstance(value, str):
        hosts = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("cluster.hosts entries must be strings.")
            stripped = item.strip()
            if stripped:
                hosts.append(stripped)
    else:
        raise ConfigurationError("cluster.hosts must be a string or list of strings.")
    if not hosts:
        raise ConfigurationError("cluster.hosts must contain at least one host.")
    return tuple(hosts)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
