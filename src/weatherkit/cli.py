"""weatherkit command-line interface.

Renders a saved weather API response as text and validates display
settings files.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final

import typer

from weatherkit.display import ForecastTextRenderer
from weatherkit.errors import WeatherKitError
from weatherkit.forecasts import Forecast
from weatherkit.settings import DisplaySettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="WeatherKit forecast CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "weatherkit.cli"

FORECAST_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Saved API response")
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
TIMEZONE_OPTION = typer.Option(None, "--timezone", "-z", help="Override the configured timezone")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


@app.command()
def render(
    forecast_file: Path = FORECAST_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    timezone: str | None = TIMEZONE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print current, hourly and daily forecasts from a JSON response."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = DisplaySettings.load(config)
        if timezone:
            settings = settings.model_copy(update={"timezone": timezone})
        payload = json.loads(forecast_file.read_text(encoding="utf-8"))
        forecast = Forecast.from_json(payload, settings.timezone)
    except (RuntimeError, FileNotFoundError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except WeatherKitError as exc:
        logger.error("Could not parse %s: %s", forecast_file, exc.message)
        typer.secho(exc.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    for line in ForecastTextRenderer(settings).render(forecast):
        typer.echo(line)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        DisplaySettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
