from __future__ import annotations

import math
from collections.abc import Sequence

from geo_engine.models import GeoPoint
from geo_engine.nearest import EmptyCandidatesError, find_nearest

from locator_pipeline.core.exceptions import SearchError
from locator_pipeline.core.models import AirportRecord, Coordinate
from locator_pipeline.core.pipeline import StageAction
from locator_pipeline.core.result import PipelineResult, Success


def _airport_location(airport: AirportRecord) -> GeoPoint:
    try:
        lat, lon = float(airport.lat), float(airport.lon)
    except (TypeError, ValueError) as exc:
        raise SearchError(f"Airport '{airport.code}' has unreadable coordinates.") from exc
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise SearchError(f"Airport '{airport.code}' has unreadable coordinates.")
    return GeoPoint(lat=lat, lon=lon)


def find_nearest_airport(coordinate: Coordinate, airports: Sequence[AirportRecord]) -> AirportRecord:
    # linear scan; equidistant airports resolve to the one listed first
    origin = GeoPoint(lat=coordinate.lat, lon=coordinate.lon)
    try:
        airport, _ = find_nearest(origin, airports, _airport_location)
    except EmptyCandidatesError as exc:
        raise SearchError("Airport dataset is empty.") from exc
    return airport


def build_lookup_stage(airports: Sequence[AirportRecord]) -> StageAction:
    def lookup(coordinate: Coordinate) -> PipelineResult:
        return Success(find_nearest_airport(coordinate, airports))

    return lookup
