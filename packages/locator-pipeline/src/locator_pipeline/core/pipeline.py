from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import asdict, dataclass, field, is_dataclass
from enum import Enum
from time import perf_counter
from typing import Any
from uuid import uuid4

from locator_pipeline.core.exceptions import PipelineError, PipelineTimeoutError
from locator_pipeline.core.metrics import InMemoryPipelineMetricsCollector
from locator_pipeline.core.result import Failure, PipelineResult, Success

logger = logging.getLogger(__name__)

StageAction = Callable[[Any], PipelineResult]


@dataclass(frozen=True)
class StageDescriptor:
    """One step of a pipeline.

    ``action`` is a plain synchronous callable. It returns ``Success`` or
    ``Failure``, or raises a ``PipelineError`` for conditions that are not
    ordinary input problems. Stages are never retried, so ``retries`` only
    accepts 0.
    """

    name: str
    action: StageAction
    timeout_seconds: float
    retries: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("stage name must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if self.retries != 0:
            raise ValueError("stages are not retried; retries must be 0")


class ExecutionStatus(str, Enum):
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    TIMED_OUT = "TIMED_OUT"


@dataclass(frozen=True)
class StageTransition:
    stage: str
    outcome: str
    duration_ms: float


@dataclass(frozen=True)
class PipelineExecution:
    execution_id: str
    status: ExecutionStatus
    result: PipelineResult
    history: tuple[StageTransition, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"execution_id": self.execution_id, "status": self.status.value}
        if isinstance(self.result, Success):
            payload = self.result.payload
            body["output"] = asdict(payload) if is_dataclass(payload) and not isinstance(payload, type) else payload
        else:
            body["error"] = self.result.error
            body["cause"] = self.result.message
        return body


@dataclass
class _ExecutionTrace:
    history: list[StageTransition] = field(default_factory=list)
    current_stage: str | None = None
    stage_started: float = 0.0

    def enter(self, stage: str) -> None:
        self.current_stage = stage
        self.stage_started = perf_counter()

    def leave(self, outcome: str) -> float:
        duration_ms = (perf_counter() - self.stage_started) * 1000.0
        if self.current_stage is not None:
            self.history.append(StageTransition(self.current_stage, outcome, duration_ms))
        self.current_stage = None
        return duration_ms


class PipelineRunner:
    """Runs stages in order, stopping at the first failure.

    Each stage gets its own deadline and the whole execution is bounded by
    ``overall_timeout_seconds``. Stage bodies run on worker threads; on a
    deadline the thread is abandoned and its result discarded. The runner
    holds no per-execution state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        stages: Sequence[StageDescriptor],
        overall_timeout_seconds: float,
        metrics: InMemoryPipelineMetricsCollector | None = None,
        name: str = "pipeline",
    ) -> None:
        if not stages:
            raise ValueError("pipeline needs at least one stage")
        if overall_timeout_seconds <= 0:
            raise ValueError("overall_timeout_seconds must be > 0")
        names = [stage.name for stage in stages]
        if len(set(names)) != len(names):
            raise ValueError("stage names must be unique")
        self._stages = tuple(stages)
        self._overall_timeout_seconds = overall_timeout_seconds
        self._metrics = metrics
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def stages(self) -> tuple[StageDescriptor, ...]:
        return self._stages

    async def execute(self, payload: Any, execution_id: str | None = None) -> PipelineExecution:
        execution_id = execution_id or str(uuid4())
        log_extra = {"component": "locator_pipeline", "pipeline": self._name, "execution_id": execution_id}
        logger.info("pipeline_execution_started", extra=log_extra)
        trace = _ExecutionTrace()
        started = perf_counter()
        try:
            result = await asyncio.wait_for(
                self._run_stages(payload, trace, execution_id),
                timeout=self._overall_timeout_seconds,
            )
        except TimeoutError:
            result = PipelineTimeoutError("Execution", self._overall_timeout_seconds).to_failure()
            in_flight = trace.current_stage
            if in_flight is not None:
                self._observe_stage(in_flight, trace.leave("timed_out"))
                if self._metrics:
                    self._metrics.increment_failure(in_flight, result.error)

        status = self._status_for(result)
        duration_ms = (perf_counter() - started) * 1000.0
        if self._metrics:
            self._metrics.increment_execution(status.value, pipeline=self._name)
            self._metrics.observe_execution_duration(duration_ms, pipeline=self._name)
        if isinstance(result, Failure):
            logger.warning(
                "pipeline_execution_failed",
                extra={**log_extra, "status": status.value, "error": result.error, "cause": result.message},
            )
        else:
            logger.info(
                "pipeline_execution_completed",
                extra={**log_extra, "status": status.value, "duration_ms": round(duration_ms, 3)},
            )
        return PipelineExecution(
            execution_id=execution_id,
            status=status,
            result=result,
            history=tuple(trace.history),
        )

    async def _run_stages(self, payload: Any, trace: _ExecutionTrace, execution_id: str) -> PipelineResult:
        current = payload
        for stage in self._stages:
            trace.enter(stage.name)
            if self._metrics:
                self._metrics.increment_stage_invocation(stage.name)
            result = await self._run_stage(stage, current)
            outcome = "succeeded" if isinstance(result, Success) else "failed"
            if isinstance(result, Failure) and result.error == PipelineTimeoutError.error_type:
                outcome = "timed_out"
            self._observe_stage(stage.name, trace.leave(outcome))
            if isinstance(result, Failure):
                if self._metrics:
                    self._metrics.increment_failure(stage.name, result.error)
                logger.info(
                    "pipeline_stage_failed",
                    extra={
                        "component": "locator_pipeline",
                        "execution_id": execution_id,
                        "stage": stage.name,
                        "error": result.error,
                    },
                )
                return result
            current = result.payload
        return Success(current)

    async def _run_stage(self, stage: StageDescriptor, payload: Any) -> PipelineResult:
        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(stage.action, payload),
                timeout=stage.timeout_seconds,
            )
        except TimeoutError:
            return PipelineTimeoutError(f"Stage '{stage.name}'", stage.timeout_seconds).to_failure()
        except PipelineError as exc:
            return exc.to_failure()
        if not isinstance(result, (Success, Failure)):
            raise TypeError(
                f"stage '{stage.name}' returned {type(result).__name__}, expected Success or Failure"
            )
        return result

    def _observe_stage(self, stage: str, duration_ms: float) -> None:
        if self._metrics:
            self._metrics.observe_stage_duration(stage, duration_ms)

    @staticmethod
    def _status_for(result: PipelineResult) -> ExecutionStatus:
        if isinstance(result, Success):
            return ExecutionStatus.SUCCEEDED
        if result.error == PipelineTimeoutError.error_type:
            return ExecutionStatus.TIMED_OUT
        return ExecutionStatus.FAILED
