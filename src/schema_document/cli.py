"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from schema_document.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_document.document_codec import (
    SchemaCodecError,
    decode_definitions,
    decode_schema,
    encode_definitions,
    encode_schema,
)
from schema_document.schema_model import Definitions, Schema

_DOCUMENT_KINDS = ("definitions", "schema")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-document-model")
@click.option("--verbose", is_flag=True, default=False, help="Log decode and encode details.")
def cli(verbose: bool) -> None:
    """Order-preserving JSON Schema document utility."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML codec configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML codec configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (ConfigurationError, FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="format")
@click.argument("input_path", type=click.Path(path_type=str))
@click.option(
    "--kind",
    type=click.Choice(_DOCUMENT_KINDS),
    default="definitions",
    show_default=True,
    help="Whether the document is a definitions table or a single schema",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON codec configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the re-encoded document here instead of standard output",
)
def format_document(
    input_path: str, kind: str, config_path: str | None, output_path: str | None
) -> None:
    """Decode a schema document and write it back re-encoded."""
    try:
        settings = load_configuration(config_path).codec
        data = Path(input_path).read_bytes()
        if kind == "schema":
            encoded = encode_schema(decode_schema(data, settings), settings)
        else:
            encoded = encode_definitions(decode_definitions(data, settings), settings)
        if output_path:
            Path(output_path).write_bytes(encoded + b"\n")
    except (ConfigurationError, SchemaCodecError, OSError) as exc:
        raise CliError(str(exc)) from exc
    if output_path:
        click.echo(str(Path(output_path).resolve()))
    else:
        click.echo(encoded.decode("utf-8"))


@cli.command(name="properties")
@click.argument("input_path", type=click.Path(path_type=str))
@click.option(
    "--definition",
    "definition_name",
    required=False,
    help="Definition to inspect; omit when the document is a single schema",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON codec configuration file",
)
def list_properties(input_path: str, definition_name: str | None, config_path: str | None) -> None:
    """List property names in declaration order with their types."""
    try:
        settings = load_configuration(config_path).codec
        data = Path(input_path).read_bytes()
        if definition_name is None:
            schema = decode_schema(data, settings)
        else:
            schema = _select_definition(decode_definitions(data, settings), definition_name)
    except (ConfigurationError, SchemaCodecError, OSError) as exc:
        raise CliError(str(exc)) from exc
    if schema.properties is None:
        raise CliError("Schema declares no properties.")
    for name, child in schema.properties.items():
        click.echo(f"{name}\t{child.type if child.type is not None else '-'}")


def _select_definition(definitions: Definitions, name: str) -> Schema:
    schema, found = definitions.lookup(name)
    if not found or schema is None:
        raise CliError(f"Definition not found: {name}")
    return schema


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
