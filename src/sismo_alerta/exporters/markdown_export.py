"""Markdown exporter for event assessments."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from sismo_alerta.arrival import format_duration
from sismo_alerta.intensity import roman_numeral
from sismo_alerta.models import EventAssessment


def _event_label(a: EventAssessment) -> str:
    return a.event.reference or a.event.event_id or a.event.occurred_at.strftime("%Y-%m-%d %H:%M UTC")


def render_markdown(assessments: list[EventAssessment]) -> str:
    """Render assessments as a summary table followed by per-event advice."""
    timestamp = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [
        "# Seismic Alert Report",
        f"Generated: {timestamp}",
        "",
    ]

    # -- Event Summary table --
    lines.extend([
        "## Event Summary",
        "",
        "| Event | Mag | Depth (km) | Severity | Distance (km) | S-wave | Alert Lead"
        " | Intensity | Tsunami |",
        "|:------|----:|-----------:|:---------|--------------:|-------:|-----------:"
        "|:----------|:--------|",
    ])
    for a in assessments:
        lines.append(
            f"| {_event_label(a)} | {a.event.magnitude:.1f} | {a.event.depth_km:.0f}"
            f" | {a.severity.value}"
            f" | {a.arrival.distance_km:.0f}"
            f" | {format_duration(a.arrival.s_wave_seconds)}"
            f" | {format_duration(a.arrival.alert_lead_seconds)}"
            f" | {roman_numeral(a.intensity)}"
            f" | {a.tsunami.risk.value} |"
        )

    # -- Per-event details --
    for a in assessments:
        lines.extend([
            "",
            f"## {_event_label(a)}",
            "",
            f"Location: {a.region_name} ({a.macro_zone.value}), soil {a.soil_type.value},"
            f" site risk {a.site_risk.value}",
            "",
            f"**Intensity {roman_numeral(a.intensity)}**: {a.intensity_description}",
            "",
        ])
        lines.extend(f"- {r}" for r in a.recommendations)

        if a.tsunami.is_threat and a.tsunami.nearest_coastal_point is not None:
            lines.extend([
                "",
                f"**Tsunami {a.tsunami.risk.value}**: nearest coast"
                f" {a.tsunami.nearest_coastal_point.name},"
                f" arrival in ~{a.tsunami.estimated_arrival_minutes:.0f} min",
            ])
            if a.evacuation_instructions:
                lines.append("")
                lines.extend(f"- {step}" for step in a.evacuation_instructions)

    lines.append("")  # trailing newline
    return "\n".join(lines)


def export_markdown(
    assessments: list[EventAssessment],
    output_path: Path,
) -> Path:
    """Export assessments as a Markdown report."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(render_markdown(assessments))
    return output_path
