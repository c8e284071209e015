"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from elastic_schema.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "elastic-schema.yaml",
        """
cluster:
  hosts: "http://es1:9200, http://es2:9200"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.cluster.hosts == ("http://es1:9200", "http://es2:9200")
    assert configuration.cluster.basic_auth is None
    assert configuration.cluster.api_key is None
    assert configuration.cluster.verify_certs is True
    assert configuration.cluster.ca_certs is None
    assert configuration.cluster.request_timeout == 30
    assert configuration.cluster.index_prefix is None


def test_loads_json_configuration_with_relative_ca_path(tmp_path: Path) -> None:
    ca_path = _write_file(tmp_path / "ca.pem", "-----BEGIN CERTIFICATE-----")
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "cluster": {
                    "hosts": ["https://localhost:9200"],
                    "username": "elastic",
                    "password": "changeme",
                    "ca_certs": "ca.pem",
                    "request_timeout": 5,
                    "index_prefix": "tenant",
                }
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.cluster.basic_auth == ("elastic", "changeme")
    assert configuration.cluster.ca_certs == ca_path.resolve()
    assert configuration.cluster.request_timeout == 5
    assert configuration.cluster.index_prefix == "tenant"


@pytest.mark.parametrize(
    ("cluster_section", "message"),
    [
        ({}, "cluster.hosts is required"),
        ({"hosts": []}, "at least one host"),
        ({"hosts": [9200]}, "entries must be strings"),
        ({"hosts": "http://es:9200", "username": "elastic"}, "must be set together"),
        (
            {"hosts": "http://es:9200", "username": "u", "password": "p", "api_key": "k"},
            "must not be combined",
        ),
        ({"hosts": "http://es:9200", "verify_certs": "yes"}, "must be a boolean"),
        ({"hosts": "http://es:9200", "request_timeout": 0}, "greater than zero"),
        ({"hosts": "http://es:9200", "request_timeout": True}, "must be an integer"),
        ({"hosts": "http://es:9200", "ca_certs": "missing.pem"}, "CA certificate file not found"),
    ],
)
def test_errors_when_cluster_section_invalid(
    tmp_path: Path, cluster_section: dict, message: str
) -> None:
    config_path = _write_file(tmp_path / "config.json", json.dumps({"cluster": cluster_section}))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_errors_when_cluster_section_missing(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    with pytest.raises(ConfigurationError, match="Configuration section 'cluster' is required"):
        load_configuration(config_path)


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


def test_errors_when_configuration_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")
