from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Coordinate:
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class AirportRecord:
    code: str
    name: str
    lat: str
    lon: str
    city: str = ""
    state: str = ""
    country: str = ""
    icao: str = ""
    tz: str = ""
    type: str = ""

    def to_payload(self) -> dict[str, str]:
        return asdict(self)
