"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_typegen.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from schema_typegen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-typegen")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate static type definitions from a content schema snapshot."""
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
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the type definition file to write (overrides output.path)",
)
@click.option(
    "--intersection-types/--union-types",
    "use_intersection_types",
    default=None,
    help="Combine relation keys and related records with '&' instead of '|'.",
)
@click.option(
    "--legacy-singular/--array-directory",
    "legacy_singular_mode",
    default=None,
    help="Map collections to single records in the directory type.",
)
@click.option(
    "--required-non-null/--required-nullable",
    "treat_required_as_non_null",
    default=None,
    help="Drop nullability from fields marked required.",
)
def generate(
    config_path: str,
    output_path: str | None,
    use_intersection_types: bool | None,
    legacy_singular_mode: bool | None,
    treat_required_as_non_null: bool | None,
) -> None:
    """Generate type definitions from the configured schema snapshot."""
    try:
        outcome = execute_generation_run(
            GenerationRequest(
                config_path=config_path,
                output_path=output_path,
                use_intersection_types=use_intersection_types,
                legacy_singular_mode=legacy_singular_mode,
                treat_required_as_non_null=treat_required_as_non_null,
            )
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is None:
        click.echo(outcome.text, nl=False)
    else:
        click.echo(str(outcome.output_path))


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
