from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from locator_pipeline.core.models import Coordinate


class NearestAirportRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # range checks belong to the validation stage, not the schema
    lat: float | None = None
    lon: float | None = None

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lon=self.lon)
