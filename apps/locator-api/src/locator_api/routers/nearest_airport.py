from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from locator_pipeline.core.pipeline import PipelineRunner

from locator_api.dependencies import get_pipeline
from locator_api.response import render_execution
from locator_api.schemas.airport import NearestAirportRequest

router = APIRouter(tags=["nearest-airport"])
logger = logging.getLogger(__name__)


@router.post("/")
async def nearest_airport(
    body: NearestAirportRequest,
    pipeline: PipelineRunner = Depends(get_pipeline),
) -> JSONResponse:
    execution = await pipeline.execute(body.to_coordinate())
    logger.info(
        "nearest_airport_request_completed",
        extra={
            "component": "locator_api",
            "execution_id": execution.execution_id,
            "status": execution.status.value,
        },
    )
    return render_execution(execution)
