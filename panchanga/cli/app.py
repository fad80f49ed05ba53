"""Primary Typer application for the Panchanga CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .. import get_version
from ..boot import configure_logging
from ..config.settings import Settings, load_settings
from ..core.time import CivilDate, Location
from ..exceptions import PanchangaError
from ..ephemeris.swe import backend_version
from ..observability import ensure_metrics_registered
from ..service import PanchangaResult, PanchangaService, matching_date_to_dict

app = typer.Typer(help="Panchanga calculator: tithi, nakshatra, yoga, karana and masa.")


def _load(config: Optional[Path]) -> Settings:
    return load_settings(config) if config is not None else Settings()


def _service(settings: Settings) -> PanchangaService:
    from ..ephemeris.swisseph_adapter import SwissEphemerisProvider

    return PanchangaService(SwissEphemerisProvider.from_settings(settings), settings=settings)


def _fmt(parts: tuple[int, int, int] | list[int]) -> str:
    h, m, s = parts
    return f"{h:02d}:{m:02d}:{s:02d}"


def _panchanga_table(result: PanchangaResult) -> str:
    masa = result.masa.name + (" (Adhika)" if result.masa.is_adhika else "")
    masa += f", Sun in {result.masa.raasi_name}"
    rows = [
        ("Date", f"{result.date.isoformat()} ({result.date.calendar})"),
        ("Vaara", result.vaara.name),
        ("Tithi", f"{result.tithi.paksha} {result.tithi.name} until {_fmt(result.tithi.end_time)}"),
        ("Nakshatra", f"{result.nakshatra.name} until {_fmt(result.nakshatra.end_time)}"),
        ("Yoga", f"{result.yoga.name} until {_fmt(result.yoga.end_time)}"),
        ("Karana", result.karana.name),
        ("Masa", masa),
        ("Sunrise", _fmt(result.sunrise)),
        ("Sunset", _fmt(result.sunset)),
        ("Moonrise", _fmt(result.moonrise)),
        ("Moonset", _fmt(result.moonset)),
        ("Day length", _fmt(result.day_duration)),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}  {value}" for label, value in rows)


def _parse_inputs(
    date: str, time: Optional[str], calendar: str, lat: float, lon: float, tz: float
) -> tuple[CivilDate, Location]:
    text = f"{date}T{time}" if time else date
    try:
        return CivilDate.parse(text, calendar=calendar), Location(lat, lon, tz)
    except ValueError as exc:
        typer.secho(f"Invalid input: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Configure logging before executing subcommands."""

    configure_logging()
    ensure_metrics_registered()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("compute")
def compute(
    date: str = typer.Argument(..., help="Civil date as YYYY-MM-DD."),
    time: Optional[str] = typer.Option(None, "--time", help="Local clock time HH:MM."),
    lat: float = typer.Option(..., "--lat", help="Latitude in degrees (north positive)."),
    lon: float = typer.Option(..., "--lon", help="Longitude in degrees (east positive)."),
    tz: float = typer.Option(0.0, "--tz", help="Fixed UTC offset in hours."),
    calendar: str = typer.Option("gregorian", "--calendar", help="gregorian or julian."),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings YAML file."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
) -> None:
    """Compute the Panchanga for a date and place."""

    civil, location = _parse_inputs(date, time, calendar, lat, lon, tz)
    try:
        result = _service(_load(config)).compute_panchanga(civil, location)
    except PanchangaError as exc:
        typer.secho(f"Panchanga computation failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(_panchanga_table(result))


@app.command("match")
def match(
    date: str = typer.Argument(..., help="Base civil date as YYYY-MM-DD."),
    time: Optional[str] = typer.Option(None, "--time", help="Local clock time HH:MM."),
    lat: float = typer.Option(..., "--lat", help="Latitude in degrees (north positive)."),
    lon: float = typer.Option(..., "--lon", help="Longitude in degrees (east positive)."),
    tz: float = typer.Option(0.0, "--tz", help="Fixed UTC offset in hours."),
    calendar: str = typer.Option("gregorian", "--calendar", help="gregorian or julian."),
    range_years: Optional[int] = typer.Option(
        None, "--range", help="Years either side of the current year to search."
    ),
    year: Optional[int] = typer.Option(None, "--year", help="Centre year (default: this year)."),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings YAML file."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
) -> None:
    """List dates repeating the base date's tithi, paksha and masa."""

    civil, location = _parse_inputs(date, time, calendar, lat, lon, tz)
    try:
        matches = _service(_load(config)).find_matching_dates(
            civil, location, range_years, current_year=year
        )
    except (PanchangaError, ValueError) as exc:
        typer.secho(f"Matching-date search failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    payload = [matching_date_to_dict(item) for item in matches]
    if json_output:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    if not payload:
        typer.echo("No matching dates found.")
        return
    for item in payload:
        fields = item["fields"]
        note = "" if item["window"] == "primary" else f"  [{item['window']}: {item['matched_date']}]"
        typer.echo(
            f"{item['date']}  tithi {fields['tithi']} {fields['paksha']}  masa {fields['masa']}{note}"
        )


@app.command("version")
def version(
    backend: bool = typer.Option(False, "--backend", help="Also report the Swiss Ephemeris library."),
) -> None:
    """Print the installed version."""

    typer.echo(get_version())
    if backend:
        typer.echo(f"swisseph {backend_version() or 'not installed'}")
