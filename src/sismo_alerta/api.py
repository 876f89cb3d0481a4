"""FastAPI wrapper for the seismic estimation core."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, Response

from sismo_alerta import __version__
from sismo_alerta.assessment import assess_event
from sismo_alerta.config import OutputFormat, SismoAlertaConfig
from sismo_alerta.exporters import assessment_to_dict, render_markdown
from sismo_alerta.models import (
    ConstructionType,
    Coordinate,
    SeismicEvent,
    SoilType,
    UserLocation,
)
from sismo_alerta.regions import REGION_MACRO_ZONES, REGION_NAMES
from sismo_alerta.validation import InvalidInputError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:
    """Store startup state and the shared config for the request handlers."""
    application.state.start_time = datetime.now(tz=timezone.utc)
    application.state.assessment_count = 0
    application.state.config = SismoAlertaConfig()
    yield


app = FastAPI(
    title="Sismo Alerta API",
    description="Earthquake early-warning estimates for Chile.",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
def health() -> dict[str, Any]:
    """Server health check with uptime, version, and assessment count."""
    now = datetime.now(tz=timezone.utc)
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round((now - app.state.start_time).total_seconds(), 1),
        "assessment_count": app.state.assessment_count,
    }


@app.get("/regions")
def list_regions() -> list[dict[str, str]]:
    """Region codes with display names and macro-zones."""
    return [
        {"code": code, "name": REGION_NAMES[code], "macro_zone": REGION_MACRO_ZONES[code].value}
        for code in sorted(REGION_NAMES)
    ]


@app.get("/assess")
def get_assessment(
    lat: Annotated[float, Query(ge=-90.0, le=90.0, description="Epicentre latitude.")],
    lon: Annotated[float, Query(ge=-180.0, le=180.0, description="Epicentre longitude.")],
    magnitude: Annotated[float, Query(le=10.0, description="Event magnitude; small events can be negative.")],
    depth: Annotated[float, Query(ge=0.0, le=800.0, description="Hypocentre depth in km.")],
    user_lat: Annotated[float, Query(ge=-90.0, le=90.0, description="User latitude.")],
    user_lon: Annotated[float, Query(ge=-180.0, le=180.0, description="User longitude.")],
    region: Annotated[str, Query(description="User region code (01-16).")] = "",
    soil: Annotated[SoilType | None, Query(description="Soil type at the user location.")] = None,
    construction: Annotated[
        ConstructionType | None, Query(description="Construction type."),
    ] = None,
    occurred_at: Annotated[
        datetime | None, Query(description="Origin time (ISO-8601); defaults to now."),
    ] = None,
    format: Annotated[OutputFormat, Query(description="Response format.")] = "json",
) -> Response:
    """Assess one earthquake for one user location.

    Query parameters mirror the CLI ``assess`` options. The ``format`` param
    selects a JSON object or a Markdown report.
    """
    config: SismoAlertaConfig = app.state.config
    when = occurred_at or datetime.now(tz=timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    try:
        event = SeismicEvent(
            epicenter=Coordinate(lat, lon),
            depth_km=depth,
            magnitude=magnitude,
            occurred_at=when,
        )
        location = UserLocation(Coordinate(user_lat, user_lon), region)
        result = assess_event(event, location, soil, construction, config)
    except InvalidInputError as exc:
        logger.info("Rejected assessment request: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    app.state.assessment_count += 1

    if format == "markdown":
        return Response(
            content=render_markdown([result]),
            media_type="text/markdown; charset=utf-8",
        )
    return JSONResponse(content=assessment_to_dict(result))
