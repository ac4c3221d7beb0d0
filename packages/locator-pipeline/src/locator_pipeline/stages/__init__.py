"""Pipeline stages for the nearest airport workflow."""

from locator_pipeline.stages.lookup import build_lookup_stage, find_nearest_airport
from locator_pipeline.stages.validation import validate_coordinate

__all__ = ["build_lookup_stage", "find_nearest_airport", "validate_coordinate"]
