"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from record_schematic.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_DIR,
    write_placeholder_configuration,
)
from record_schematic.run_execution import (
    GenerationRequest,
    GenerationRunError,
    execute_schema_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="record-schematic")
def cli() -> None:
    """Generate JSON Schema files from typed record definitions."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
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
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--path",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help=f"Directory where schemas are saved (default: output_dir or {DEFAULT_OUTPUT_DIR})",
)
def generate(config_path: str, output_dir: str | None) -> None:
    """Generate every configured schema and write one JSON file per schema."""
    try:
        outcome = execute_schema_generation_run(
            GenerationRequest(config_path=config_path, output_dir=output_dir)
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"Schemas generated successfully, located at: {outcome.output_dir}")


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
