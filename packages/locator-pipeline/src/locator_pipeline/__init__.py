"""Coordinate validation and nearest airport lookup pipeline."""

from locator_pipeline.core.exceptions import (
    PipelineError,
    PipelineTimeoutError,
    SearchError,
    ValidationError,
)
from locator_pipeline.core.models import AirportRecord, Coordinate
from locator_pipeline.core.pipeline import (
    ExecutionStatus,
    PipelineExecution,
    PipelineRunner,
    StageDescriptor,
)
from locator_pipeline.core.result import Failure, PipelineResult, Success
from locator_pipeline.dataset import default_airports, load_airports
from locator_pipeline.workflow import DEFAULT_TIMEOUTS, PipelineTimeouts, build_nearest_airport_pipeline

__all__ = [
    "AirportRecord",
    "Coordinate",
    "DEFAULT_TIMEOUTS",
    "ExecutionStatus",
    "Failure",
    "PipelineError",
    "PipelineExecution",
    "PipelineResult",
    "PipelineRunner",
    "PipelineTimeoutError",
    "PipelineTimeouts",
    "SearchError",
    "StageDescriptor",
    "Success",
    "ValidationError",
    "build_nearest_airport_pipeline",
    "default_airports",
    "load_airports",
]
