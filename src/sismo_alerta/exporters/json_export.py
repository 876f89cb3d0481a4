"""JSON exporter for event assessments."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

from sismo_alerta.models import EventAssessment


def _normalize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value


def assessment_to_dict(assessment: EventAssessment) -> dict[str, Any]:
    """Plain-JSON representation of one assessment (timestamps as ISO-8601)."""
    return _normalize(asdict(assessment))


def export_json(
    assessments: list[EventAssessment],
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Export assessments to a JSON file."""
    data = [assessment_to_dict(a) for a in assessments]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
    return output_path
