from __future__ import annotations

from collections.abc import Sequence

from devkit.config import load_settings
from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from locator_pipeline.core.metrics import InMemoryPipelineMetricsCollector
from locator_pipeline.core.models import AirportRecord
from locator_pipeline.core.prometheus_exporter import PipelinePrometheusExporter
from locator_pipeline.dataset import default_airports
from locator_pipeline.workflow import build_nearest_airport_pipeline

from locator_api.middleware import ObservabilityMiddleware
from locator_api.observability import (
    CompositeApiMetricsCollector,
    InMemoryApiMetricsCollector,
    PrometheusApiMetricsCollector,
    get_trace_id,
)
from locator_api.response import error_response
from locator_api.routers.nearest_airport import router as nearest_airport_router

SERVICE_NAME = "nearest-airport-api"


def create_app(airports: Sequence[AirportRecord] | None = None) -> FastAPI:
    settings = load_settings(SERVICE_NAME)
    app = FastAPI(title="Nearest Airport API", version="0.1.0")
    configure_logging(settings.LOG_LEVEL)
    configure_otel(service_name=settings.SERVICE_NAME)
    configure_probe_access_log_filter(settings.PROBE_PATHS)

    reference = default_airports() if airports is None else tuple(airports)
    app.state.pipeline_metrics = InMemoryPipelineMetricsCollector()
    app.state.pipeline_exporter = PipelinePrometheusExporter()
    app.state.pipeline = build_nearest_airport_pipeline(
        reference,
        metrics=app.state.pipeline_metrics,
    )
    app.state.api_metrics = InMemoryApiMetricsCollector()
    app.state.prom_metrics = PrometheusApiMetricsCollector()
    app.state.composite_metrics = CompositeApiMetricsCollector(
        [app.state.api_metrics, app.state.prom_metrics]
    )
    app.add_middleware(ObservabilityMiddleware, collector=app.state.composite_metrics)
    app.include_router(nearest_airport_router)

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok"}

    @app.get("/readyz")
    async def readyz() -> dict:
        return {"status": "ready", "airports": len(reference)}

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = app.state.prom_metrics.render() + app.state.pipeline_exporter.render(app.state.pipeline_metrics)
        return Response(content=payload, media_type="text/plain; version=0.0.4")

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(err["msg"] for err in exc.errors())
        return JSONResponse(status_code=422, content=error_response(get_trace_id(), message))

    return app


app = create_app()
