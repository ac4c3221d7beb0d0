from __future__ import annotations

from fastapi import Request

from locator_pipeline.core.pipeline import PipelineRunner


def get_pipeline(request: Request) -> PipelineRunner:
    return request.app.state.pipeline
