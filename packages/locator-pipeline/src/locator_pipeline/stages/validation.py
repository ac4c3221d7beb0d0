from __future__ import annotations

from locator_pipeline.core.exceptions import ValidationError
from locator_pipeline.core.models import Coordinate
from locator_pipeline.core.result import PipelineResult, Success

MISSING_COORDINATE_MESSAGE = "Both latitude and longitude must be supplied."
LATITUDE_RANGE_MESSAGE = "Latitude must be between -90 and 90."
LONGITUDE_RANGE_MESSAGE = "Longitude must be between -180 and 180."


def validate_coordinate(coordinate: Coordinate) -> PipelineResult:
    """Check presence, then latitude range, then longitude range.

    The first violated rule decides the failure. A valid coordinate is passed
    through untouched.
    """
    if coordinate.lat is None or coordinate.lon is None:
        return ValidationError(MISSING_COORDINATE_MESSAGE).to_failure()
    # chained form so NaN fails the range check
    if not -90 <= coordinate.lat <= 90:
        return ValidationError(LATITUDE_RANGE_MESSAGE).to_failure()
    if not -180 <= coordinate.lon <= 180:
        return ValidationError(LONGITUDE_RANGE_MESSAGE).to_failure()
    return Success(coordinate)
