"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from record_jsonschema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from record_jsonschema.document_encoding import encode_schema_document, write_schema_document
from record_jsonschema.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_generation_run,
)
from record_jsonschema.schema_generation import generate_schema
from record_jsonschema.type_descriptors import TypeResolutionError, resolve_record_type


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="record-jsonschema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate JSON Schema documents from Python dataclasses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate")
@click.option(
    "--type",
    "type_path",
    required=True,
    help="Dataclass to render, as package.module:ClassName",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the schema to this file instead of standard output",
)
@click.option(
    "--indent",
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="JSON indentation width",
)
def generate(type_path: str, output_path: str | None, indent: int) -> None:
    """Generate the JSON Schema of one dataclass."""
    try:
        record_type = resolve_record_type(type_path)
    except TypeResolutionError as exc:
        raise CliError(str(exc)) from exc

    document = generate_schema(record_type)
    if output_path is None:
        click.echo(encode_schema_document(document, indent=indent))
        return
    try:
        written = write_schema_document(document, output_path, indent=indent)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
def run_generation(config_path: str) -> None:
    """Generate every schema target listed in the configuration file."""
    try:
        outcome = execute_schema_generation_run(RunRequest(config_path=config_path))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for output in outcome.output_paths:
        click.echo(str(output))


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
