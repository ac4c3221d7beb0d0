from __future__ import annotations

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from locator_pipeline.core.metrics import InMemoryPipelineMetricsCollector


class PipelinePrometheusExporter:
    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._stage_duration = Gauge(
            "pipeline_stage_duration_ms",
            "Latest stage duration in milliseconds",
            labelnames=("stage",),
            registry=self._registry,
        )
        self._stage_invocations = Gauge(
            "pipeline_stage_invocations_total",
            "Stage invocations grouped by stage",
            labelnames=("stage",),
            registry=self._registry,
        )
        self._stage_failures = Gauge(
            "pipeline_stage_failures_total",
            "Stage failures grouped by stage and error type",
            labelnames=("stage", "error"),
            registry=self._registry,
        )
        self._executions_total = Gauge(
            "pipeline_executions_total",
            "Pipeline executions grouped by pipeline and status",
            labelnames=("pipeline", "status"),
            registry=self._registry,
        )
        self._execution_duration = Gauge(
            "pipeline_execution_duration_ms",
            "Latest execution duration by pipeline",
            labelnames=("pipeline",),
            registry=self._registry,
        )

    def render(self, metrics: InMemoryPipelineMetricsCollector) -> str:
        for stage, duration in metrics.stage_durations.items():
            self._stage_duration.labels(stage=stage).set(duration)
        for stage, count in metrics.stage_invocations.items():
            self._stage_invocations.labels(stage=stage).set(count)
        for (stage, error), count in metrics.stage_failures_total.items():
            self._stage_failures.labels(stage=stage, error=error).set(count)
        for (pipeline, status), count in metrics.executions_total.items():
            self._executions_total.labels(pipeline=pipeline, status=status).set(count)
        for pipeline, duration in metrics.execution_duration_ms.items():
            self._execution_duration.labels(pipeline=pipeline).set(duration)
        return generate_latest(self._registry).decode("utf-8")
