import json

from locator_pipeline.core.models import AirportRecord
from locator_pipeline.core.pipeline import ExecutionStatus, PipelineExecution
from locator_pipeline.core.result import Failure, Success

from locator_api.response import error_response, render_execution, success_response


def _body(response) -> dict:
    return json.loads(response.body)


def test_success_response_shape() -> None:
    assert success_response("req-1", {"code": "LGA"}) == {"_RequestId": "req-1", "data": {"code": "LGA"}}


def test_error_response_shape() -> None:
    assert error_response("req-1", "boom") == {"_RequestId": "req-1", "error": "boom"}


def test_render_succeeded_execution() -> None:
    airport = AirportRecord(code="LGA", name="LaGuardia Airport", lat="40.7769", lon="-73.8740")
    execution = PipelineExecution("exec-1", ExecutionStatus.SUCCEEDED, Success(airport))

    response = render_execution(execution)

    assert response.status_code == 200
    assert _body(response) == {"_RequestId": "exec-1", "data": airport.to_payload()}


def test_render_failed_and_timed_out_executions() -> None:
    failed = PipelineExecution("exec-2", ExecutionStatus.FAILED, Failure("SearchError", "Airport dataset is empty."))
    timed_out = PipelineExecution(
        "exec-3",
        ExecutionStatus.TIMED_OUT,
        Failure("TimeoutError", "Execution timed out after 4.00 seconds."),
    )

    assert render_execution(failed).status_code == 500
    assert _body(render_execution(failed)) == {"_RequestId": "exec-2", "error": "Airport dataset is empty."}
    assert _body(render_execution(timed_out))["error"] == "Execution timed out after 4.00 seconds."


def test_render_passes_inconsistent_execution_through_raw() -> None:
    execution = PipelineExecution("exec-4", ExecutionStatus.SUCCEEDED, Failure("SearchError", "odd"))

    response = render_execution(execution)

    assert response.status_code == 500
    assert _body(response) == {
        "execution_id": "exec-4",
        "status": "SUCCEEDED",
        "error": "SearchError",
        "cause": "odd",
    }
