"""Adapter from upstream event-feed records to SeismicEvent."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sismo_alerta.models import Coordinate, SeismicEvent

logger = logging.getLogger(__name__)

_DEPTH_KEYS = ("depth_km", "depthKm", "depth")
_TIME_KEYS = ("timestamp", "utc_time")


def _first(record: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _parse_time(value: Any) -> datetime:
    """Accept ISO-8601 strings, epoch milliseconds or datetimes; naive means UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_feed_event(record: Any) -> SeismicEvent | None:
    """Convert one feed record into a SeismicEvent.

    Returns None when the record is not an object or a required field is
    missing or unusable, so a single bad record does not sink the whole feed.
    """
    if not isinstance(record, dict):
        logger.debug("Skipping feed record of type %s", type(record).__name__)
        return None

    magnitude = record.get("magnitude")
    latitude = record.get("latitude")
    longitude = record.get("longitude")
    depth = _first(record, _DEPTH_KEYS)
    when = _first(record, _TIME_KEYS)

    if None in (magnitude, latitude, longitude, depth, when):
        logger.debug("Skipping feed record %s: missing a required field", record.get("id"))
        return None

    try:
        return SeismicEvent(
            epicenter=Coordinate(float(latitude), float(longitude)),
            depth_km=float(depth),
            magnitude=float(magnitude),
            occurred_at=_parse_time(when),
            event_id=str(record.get("id", "")),
            reference=str(record.get("reference", "")),
        )
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        logger.debug("Skipping feed record %s: %s", record.get("id"), exc)
        return None


def parse_feed(payload: list[Any] | dict[str, Any]) -> list[SeismicEvent]:
    """Parse a feed payload: a list of records or an object with a ``data`` list.

    Events are returned newest first.
    """
    records = (payload.get("data") or []) if isinstance(payload, dict) else payload
    events: list[SeismicEvent] = []
    for record in records:
        event = parse_feed_event(record)
        if event is not None:
            events.append(event)
    logger.debug("Parsed %d of %d feed records", len(events), len(records))
    return sorted(events, key=lambda e: e.occurred_at, reverse=True)
