"""estimate command: classify and cost one part file."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from shopcost.application import PartCostingService
from shopcost.application.config import (
    ConfigError,
    config_to_classification_config,
    config_to_costing_config,
    load_config,
    load_part,
    part_to_geometry_source,
    part_to_metrics,
)
from shopcost.cli.commands.validate import display_load_error
from shopcost.domain.services import ClassificationConfig, CostingConfig
from shopcost.infrastructure import CostReportFormatter, JsonExporter

OUTPUT_FORMATS = ("text", "json")


def _load_service(config_file: Path | None) -> PartCostingService:
    if config_file is None:
        return PartCostingService(CostingConfig.defaults(), ClassificationConfig())
    config = load_config(config_file)
    return PartCostingService(
        config_to_costing_config(config),
        config_to_classification_config(config),
    )


def estimate_command(
    part_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON part file"),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a JSON rates file"),
    ] = None,
    quantity: Annotated[
        int | None,
        typer.Option("--quantity", "-q", min=1, help="Override the part quantity"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log classification and routing detail"),
    ] = False,
) -> None:
    """Classify a part, route it and print its cost.

    Example:
        shopcost estimate bracket.json --quantity 25 --config rates.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        service = _load_service(config_file)
        part = load_part(part_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        result = service.cost_part(
            part_to_metrics(part),
            part_to_geometry_source(part),
            quantity=quantity,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export(result))
    else:
        typer.echo(CostReportFormatter().format(result))
