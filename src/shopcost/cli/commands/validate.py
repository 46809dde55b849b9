"""validate-config command for checking shop rates files."""

from pathlib import Path
from typing import Annotated

import typer

from shopcost.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_costing_config,
)


def display_load_error(error: ConfigError) -> None:
    """Print a ConfigError to stderr, one line per problem."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_config_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON rates file to validate"),
    ],
) -> None:
    """Validate a shop rates file.

    Checks JSON syntax, the schema, and rate/price sanity (zero rates,
    rates above $1000/hr, prices above $100/lb, press brake tier counts).

    Exit codes:
        0 - Valid with no warnings
        1 - Has errors
        2 - Valid but has warnings

    Example:
        shopcost validate-config rates.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_costing_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
