from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from quwatro.apps.hub import HubApp, create_app
from quwatro.config import Settings, get_settings
from quwatro.utils.logging import configure_logging, get_logger

app = typer.Typer(help="QUWATRO environmental record-keeping suite.")

log = get_logger(__name__)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration:\n{exc}", err=True)
        raise typer.Exit(code=1) from None


def _launch(name: str) -> None:
    settings = _load_settings()
    configure_logging(
        level=settings.log_level, json_logs=settings.log_json, log_file=settings.log_file
    )
    console = Console()
    log.info("Session started", extra={"app": name, "data_dir": str(settings.data_dir)})
    if name == "hub":
        menu = HubApp(settings, console.input, console)
    else:
        menu = create_app(name, settings, console.input, console)
    menu.run()
    log.info("Session ended", extra={"app": name})


@app.callback(invoke_without_command=True)
def hub(ctx: typer.Context) -> None:
    """
    Open the QUWATRO hub menu (default when no command is given).
    """
    if ctx.invoked_subcommand is None:
        _launch("hub")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = _load_settings()
    typer.echo(
        f"data_dir={settings.data_dir} | "
        f"water_log={settings.water_log_path} heat_index_log={settings.heat_index_log_path} "
        f"climate_log={settings.climate_log_path} | "
        f"high_usage_threshold={settings.high_usage_threshold} "
        f"heat_index_capacity={settings.heat_index_capacity} "
        f"climate_history_capacity={settings.climate_history_capacity}"
    )


@app.command()
def quakeguard() -> None:
    """
    Open QuakeGuard, the earthquake-risk registry.
    """
    _launch("quakeguard")


@app.command()
def waver() -> None:
    """
    Open WaVer, the water-usage tracker.
    """
    _launch("waver")


@app.command()
def tempterra() -> None:
    """
    Open TempTerra, the heat-index calculator.
    """
    _launch("tempterra")


@app.command()
def ecopulse() -> None:
    """
    Open EcoPulse, the climate monitor.
    """
    _launch("ecopulse")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nCancelled by user.", err=True)


if __name__ == "__main__":
    main()
