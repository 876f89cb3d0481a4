"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from sismo_alerta import __version__
from sismo_alerta.arrival import format_duration
from sismo_alerta.assessment import assess_event, assess_feed
from sismo_alerta.config import OutputFormat, SismoAlertaConfig
from sismo_alerta.exporters import export_json, export_markdown
from sismo_alerta.feed import parse_feed
from sismo_alerta.intensity import roman_numeral
from sismo_alerta.models import (
    ConstructionType,
    Coordinate,
    EventAssessment,
    SeismicEvent,
    SoilType,
    UserLocation,
)
from sismo_alerta.regions import REGION_MACRO_ZONES, REGION_NAMES
from sismo_alerta.validation import InvalidInputError

Exporter = Callable[[list[EventAssessment], Path], Path]

EXPORTERS: dict[str, Exporter] = {
    "json": export_json,
    "markdown": export_markdown,
}

_SEVERITY_STYLE: dict[str, str] = {
    "major": "[red]major[/red]",
    "strong": "[dark_orange]strong[/dark_orange]",
    "moderate": "[yellow]moderate[/yellow]",
    "minor": "[green]minor[/green]",
}

app = typer.Typer(
    name="sismo-alerta",
    help="Earthquake early-warning estimates for Chile.",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sismo-alerta {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


def _export(assessments: list[EventAssessment], output: Path | None, fmt: OutputFormat) -> None:
    if output is None:
        return
    EXPORTERS[fmt](assessments, output)
    console.print(f"\n{fmt.upper()} written to [bold]{output}[/bold]")


def _print_assessment(a: EventAssessment) -> None:
    title = f"M{a.event.magnitude:.1f} at {a.event.depth_km:.0f} km"
    if a.event.reference:
        title += f" ({a.event.reference})"

    table = Table(title=title, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Severity", _SEVERITY_STYLE.get(a.severity.value, a.severity.value))
    table.add_row("Region", f"{a.region_name} ({a.macro_zone.value})")
    table.add_row("Site", f"{a.soil_type.value} soil, {a.site_risk.value} risk")
    table.add_row("Distance", f"{a.arrival.distance_km:.1f} km")
    table.add_row("P-wave", format_duration(a.arrival.p_wave_seconds))
    table.add_row("S-wave", format_duration(a.arrival.s_wave_seconds))
    table.add_row("Alert lead", format_duration(a.arrival.alert_lead_seconds))
    table.add_row(
        "Intensity",
        f"[on {a.intensity_color}] {roman_numeral(a.intensity)} [/] {a.intensity_description}",
    )
    tsunami = a.tsunami.risk.value
    if a.tsunami.is_threat and a.tsunami.nearest_coastal_point is not None:
        tsunami += (
            f" - {a.tsunami.nearest_coastal_point.name}"
            f" in ~{a.tsunami.estimated_arrival_minutes:.0f} min"
        )
    table.add_row("Tsunami", tsunami)
    console.print(table)

    console.print("\n[bold]Recommendations[/bold]")
    for i, rec in enumerate(a.recommendations, start=1):
        console.print(f"  {i}. {rec}")
    if a.evacuation_instructions:
        console.print("\n[bold red]Tsunami evacuation[/bold red]")
        for i, step in enumerate(a.evacuation_instructions, start=1):
            console.print(f"  {i}. {step}")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Sismo Alerta: arrival time, intensity and tsunami estimates for Chile."""


@app.command()
def assess(
    latitude: Annotated[float, typer.Option("--lat", help="Epicentre latitude.")],
    longitude: Annotated[float, typer.Option("--lon", help="Epicentre longitude.")],
    magnitude: Annotated[float, typer.Option("--magnitude", "-m", help="Event magnitude.")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Hypocentre depth in km.")],
    user_latitude: Annotated[float, typer.Option("--user-lat", help="Your latitude.")],
    user_longitude: Annotated[float, typer.Option("--user-lon", help="Your longitude.")],
    region: Annotated[
        str,
        typer.Option("--region", "-r", help="Your region code (01-16); unknown uses the central zone."),
    ] = "",
    soil: Annotated[
        SoilType | None,
        typer.Option("--soil", help="Soil type at your location; guessed when omitted."),
    ] = None,
    construction: Annotated[
        ConstructionType | None,
        typer.Option("--construction", "-c", help="Construction type of your building."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also export the assessment to this file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Export format: json or markdown."),
    ] = "json",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Assess a single earthquake for one location."""
    _setup_logging(verbose)
    config = SismoAlertaConfig(output_format=output_format)

    try:
        event = SeismicEvent(
            epicenter=Coordinate(latitude, longitude),
            depth_km=depth,
            magnitude=magnitude,
            occurred_at=datetime.now(tz=timezone.utc),
        )
        location = UserLocation(Coordinate(user_latitude, user_longitude), region)
        result = assess_event(event, location, soil, construction, config)
    except InvalidInputError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=1) from None

    _print_assessment(result)
    _export([result], output, config.output_format)


@app.command()
def feed(
    feed_file: Annotated[Path, typer.Argument(help="Event feed JSON file.", exists=True)],
    user_latitude: Annotated[float, typer.Option("--user-lat", help="Your latitude.")],
    user_longitude: Annotated[float, typer.Option("--user-lon", help="Your longitude.")],
    region: Annotated[
        str,
        typer.Option("--region", "-r", help="Your region code (01-16)."),
    ] = "",
    soil: Annotated[
        SoilType | None,
        typer.Option("--soil", help="Soil type at your location; guessed when omitted."),
    ] = None,
    construction: Annotated[
        ConstructionType | None,
        typer.Option("--construction", "-c", help="Construction type of your building."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also export the assessments to this file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Export format: json or markdown."),
    ] = "json",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Assess every event in a feed file for one location."""
    _setup_logging(verbose)
    config = SismoAlertaConfig(output_format=output_format)

    try:
        payload = json.loads(feed_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Could not read feed:[/red] {exc}")
        raise typer.Exit(code=1) from None

    events = parse_feed(payload)
    if not events:
        console.print("[yellow]No usable events in feed.[/yellow]")
        raise typer.Exit()

    try:
        location = UserLocation(Coordinate(user_latitude, user_longitude), region)
    except InvalidInputError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=1) from None

    results = assess_feed(events, location, soil, construction, config)

    console.print()
    table = Table(title="Seismic Alert Assessment")
    table.add_column("Event", style="bold")
    table.add_column("Mag", justify="right")
    table.add_column("Depth", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("S-wave", justify="right")
    table.add_column("Intensity", justify="right", style="red")
    table.add_column("Severity")
    table.add_column("Tsunami")

    for a in results:
        table.add_row(
            a.event.reference or a.event.event_id or "-",
            f"{a.event.magnitude:.1f}",
            f"{a.event.depth_km:.0f} km",
            f"{a.arrival.distance_km:.0f} km",
            format_duration(a.arrival.s_wave_seconds),
            roman_numeral(a.intensity),
            _SEVERITY_STYLE.get(a.severity.value, a.severity.value),
            a.tsunami.risk.value,
        )

    console.print(table)
    console.print(f"Total events: {len(results)}")
    _export(results, output, config.output_format)


@app.command()
def regions() -> None:
    """List region codes, names and macro-zones."""
    table = Table(title="Chilean Regions")
    table.add_column("Code", style="dim")
    table.add_column("Region", style="bold")
    table.add_column("Macro-zone")
    for code in sorted(REGION_NAMES):
        table.add_row(code, REGION_NAMES[code], REGION_MACRO_ZONES[code].value)
    console.print(table)
