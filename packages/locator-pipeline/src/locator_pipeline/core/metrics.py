from __future__ import annotations

from collections import defaultdict


class InMemoryPipelineMetricsCollector:
    """Process-wide pipeline counters.

    Every map is keyed by stage, pipeline or error type, so its size is fixed
    by the workflow definition rather than by traffic. Durations keep only
    the latest observation per key.
    """

    def __init__(self) -> None:
        self.stage_durations: dict[str, float] = {}
        self.stage_invocations: dict[str, int] = defaultdict(int)
        self.stage_failures_total: dict[tuple[str, str], int] = defaultdict(int)
        self.executions_total: dict[tuple[str, str], int] = defaultdict(int)
        self.execution_duration_ms: dict[str, float] = {}

    def observe_stage_duration(self, stage: str, duration_ms: float) -> None:
        self.stage_durations[stage] = duration_ms

    def increment_stage_invocation(self, stage: str) -> None:
        self.stage_invocations[stage] += 1

    def increment_failure(self, stage: str, error: str) -> None:
        self.stage_failures_total[(stage, error)] += 1

    def increment_execution(self, status: str, pipeline: str = "pipeline") -> None:
        self.executions_total[(pipeline, status)] += 1

    def observe_execution_duration(self, duration_ms: float, pipeline: str = "pipeline") -> None:
        self.execution_duration_ms[pipeline] = duration_ms
