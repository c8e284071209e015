"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict
from typing import Any

import click

from elastic_schema.cluster_connection import ClusterOperationError, ElasticsearchConnection
from elastic_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from elastic_schema.schema_management import SchemaBuilder

_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML cluster configuration file",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="elastic-schema")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Manage index schemas and analyzers on a search cluster."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML cluster configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML cluster configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="indices")
@_CONFIG_OPTION
@click.option("--include-system", is_flag=True, default=False, help="Include dot-prefixed indices.")
def list_indices(config_path: str, include_system: bool) -> None:
    """List indices known to the cluster."""
    builder = _open_schema_builder(config_path)
    try:
        indices = builder.get_indices(include_system)
    except ClusterOperationError as exc:
        raise CliError(str(exc)) from exc
    for info in indices:
        click.echo(info.name)


@cli.command(name="settings")
@click.argument("index")
@_CONFIG_OPTION
def show_settings(index: str, config_path: str) -> None:
    """Print the raw settings of one index."""
    builder = _open_schema_builder(config_path)
    try:
        _echo_json(builder.get_settings(index))
    except ClusterOperationError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="mappings")
@click.argument("index")
@_CONFIG_OPTION
def show_mappings(index: str, config_path: str) -> None:
    """Print the raw mappings of one index."""
    builder = _open_schema_builder(config_path)
    try:
        _echo_json(builder.get_mappings(index))
    except ClusterOperationError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="show-index")
@click.argument("index")
@_CONFIG_OPTION
def show_index(index: str, config_path: str) -> None:
    """Print index metadata, or fail when the index does not exist."""
    builder = _open_schema_builder(config_path)
    try:
        info = builder.get_index(index)
    except ClusterOperationError as exc:
        raise CliError(str(exc)) from exc
    if info is None:
        raise CliError(f"Index not found: {index}")
    _echo_json(asdict(info))


@cli.command(name="has-field")
@click.argument("index")
@click.argument("fields", nargs=-1, required=True)
@_CONFIG_OPTION
def has_field(index: str, fields: tuple[str, ...], config_path: str) -> None:
    """Check that every FIELD is declared in the index mapping."""
    builder = _open_schema_builder(config_path)
    lookup = builder.lookup_fields(index)
    if not lookup.available:
        raise CliError(lookup.error_message or f"Mappings of {index} are unavailable.")
    missing = [field for field in fields if not lookup.contains(field)]
    for field in fields:
        click.echo(f"{field}: {'present' if field not in missing else 'missing'}")
    if missing:
        raise CliError(f"Missing fields in {lookup.index}: {', '.join(missing)}")


@cli.command(name="delete")
@click.argument("index")
@_CONFIG_OPTION
@click.option("--if-exists", is_flag=True, default=False, help="Succeed when the index is absent.")
def delete_index(index: str, config_path: str, if_exists: bool) -> None:
    """Delete one index."""
    builder = _open_schema_builder(config_path)
    try:
        deleted = builder.delete_if_exists(index) if if_exists else builder.delete(index)
    except ClusterOperationError as exc:
        raise CliError(str(exc)) from exc
    click.echo("deleted" if deleted else "not deleted")


@cli.command(name="reindex")
@click.argument("source")
@click.argument("destination")
@_CONFIG_OPTION
def reindex(source: str, destination: str, config_path: str) -> None:
    """Copy every document from SOURCE into DESTINATION."""
    builder = _open_schema_builder(config_path)
    result = builder.reindex(source, destination)
    if not result.succeeded:
        raise CliError(f"Reindex failed: {result.error_message}")
    _echo_json(result.data)


def _open_schema_builder(config_path: str) -> SchemaBuilder:
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    return SchemaBuilder(ElasticsearchConnection.from_settings(configuration.cluster))


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
