from __future__ import annotations

from locator_pipeline.core.result import Failure


class PipelineError(Exception):
    """Base pipeline exception."""

    error_type = "PipelineError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_failure(self) -> Failure:
        return Failure(error=self.error_type, message=self.message)


class ValidationError(PipelineError):
    """Coordinate is missing a field or out of range."""

    error_type = "ValidationError"


class SearchError(PipelineError):
    """Reference dataset is empty or holds unparseable entries."""

    error_type = "SearchError"


class PipelineTimeoutError(PipelineError):
    """A stage or the whole execution ran past its deadline."""

    error_type = "TimeoutError"

    def __init__(self, scope: str, timeout_seconds: float) -> None:
        super().__init__(f"{scope} timed out after {timeout_seconds:.2f} seconds.")
        self.scope = scope
        self.timeout_seconds = timeout_seconds
