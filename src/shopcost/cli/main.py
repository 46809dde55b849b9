"""Typer CLI for part cost estimation."""

import typer

from shopcost.cli.commands import estimate_command, validate_config_command

app = typer.Typer(
    name="shopcost",
    help="Classify fabricated parts and estimate routing and cost.",
)

app.command(name="estimate")(estimate_command)
app.command(name="validate-config")(validate_config_command)


if __name__ == "__main__":
    app()
