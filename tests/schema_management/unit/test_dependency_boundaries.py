"""Boundary tests for schema core dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_schema_core_does_not_import_the_elasticsearch_client() -> None:
    package_dir = _project_root() / "src" / "elastic_schema"
    core_modules = (
        package_dir / "schema_management" / "schema_builder.py",
        package_dir / "schema_management" / "mapping_projection.py",
        package_dir / "schema_management" / "lookup_outcomes.py",
        package_dir / "analysis" / "analyzer_blueprint.py",
        package_dir / "index_structure" / "index_blueprint.py",
    )
    forbidden_import_fragments = (
        "import elasticsearch",
        "from elasticsearch",
        "elastic_schema.cluster_connection.elasticsearch_connection",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
