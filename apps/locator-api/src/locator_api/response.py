from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from locator_pipeline.core.pipeline import ExecutionStatus, PipelineExecution
from locator_pipeline.core.result import Failure, Success

REQUEST_ID_FIELD = "_RequestId"


def success_response(request_id: str, data: Any) -> dict[str, Any]:
    return {REQUEST_ID_FIELD: request_id, "data": data}


def error_response(request_id: str, message: str) -> dict[str, Any]:
    return {REQUEST_ID_FIELD: request_id, "error": message}


def render_execution(execution: PipelineExecution) -> JSONResponse:
    """Map an execution onto the public envelope.

    SUCCEEDED becomes 200 with ``data``; FAILED and TIMED_OUT become 500 with
    ``error``. Anything else is passed through raw with a 500.
    """
    result = execution.result
    if execution.status is ExecutionStatus.SUCCEEDED and isinstance(result, Success):
        payload = execution.to_dict()["output"]
        return JSONResponse(
            status_code=200,
            content=jsonable_encoder(success_response(execution.execution_id, payload)),
        )
    if execution.status in (ExecutionStatus.FAILED, ExecutionStatus.TIMED_OUT) and isinstance(result, Failure):
        return JSONResponse(status_code=500, content=error_response(execution.execution_id, result.message))
    return JSONResponse(status_code=500, content=jsonable_encoder(execution.to_dict()))
