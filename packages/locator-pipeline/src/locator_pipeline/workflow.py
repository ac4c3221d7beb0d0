from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from locator_pipeline.core.metrics import InMemoryPipelineMetricsCollector
from locator_pipeline.core.models import AirportRecord
from locator_pipeline.core.pipeline import PipelineRunner, StageDescriptor
from locator_pipeline.stages.lookup import build_lookup_stage
from locator_pipeline.stages.validation import validate_coordinate

PIPELINE_NAME = "nearest_airport"
VALIDATION_STAGE = "coordinate_validation"
LOOKUP_STAGE = "nearest_airport_lookup"


@dataclass(frozen=True)
class PipelineTimeouts:
    validation_seconds: float = 1.0
    lookup_seconds: float = 2.0
    overall_seconds: float = 4.0


DEFAULT_TIMEOUTS = PipelineTimeouts()


def build_nearest_airport_pipeline(
    airports: Sequence[AirportRecord],
    timeouts: PipelineTimeouts = DEFAULT_TIMEOUTS,
    metrics: InMemoryPipelineMetricsCollector | None = None,
) -> PipelineRunner:
    stages = (
        StageDescriptor(VALIDATION_STAGE, validate_coordinate, timeouts.validation_seconds),
        StageDescriptor(LOOKUP_STAGE, build_lookup_stage(airports), timeouts.lookup_seconds),
    )
    return PipelineRunner(
        stages,
        overall_timeout_seconds=timeouts.overall_seconds,
        metrics=metrics,
        name=PIPELINE_NAME,
    )
