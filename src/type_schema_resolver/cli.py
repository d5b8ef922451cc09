"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from type_schema_resolver.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from type_schema_resolver.document_rendering import OutputFormat
from type_schema_resolver.run_execution import (
    ResolutionRunError,
    RunRequest,
    execute_resolution_run,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="type-schema-resolver")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for diagnostics written to stderr",
)
def cli(log_level: str) -> None:
    """Resolve Python model classes into a Swagger/OpenAPI definitions document."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
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
    help="Path to the YAML resolver configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML resolver configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON resolver configuration file",
)
@click.option(
    "--model",
    "model_targets",
    multiple=True,
    help="Root model as 'package.module:ClassName'; repeatable",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([member.value for member in OutputFormat]),
    required=False,
    help="Document format; overrides output.format from the configuration",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write the definitions document to; prints to stdout otherwise",
)
def resolve(
    config_path: str | None,
    model_targets: tuple[str, ...],
    output_format: str | None,
    output_path: str | None,
) -> None:
    """Resolve root models and everything they reference into schema definitions."""
    try:
        outcome = execute_resolution_run(
            RunRequest(
                config_path=config_path,
                model_targets=tuple(model_targets),
                output_format=output_format,
                output_path=output_path,
            )
        )
    except ResolutionRunError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(outcome.document_text, nl=False)


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
