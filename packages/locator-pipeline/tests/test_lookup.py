import pytest

from locator_pipeline.core.exceptions import SearchError
from locator_pipeline.core.models import AirportRecord, Coordinate
from locator_pipeline.core.result import Success
from locator_pipeline.stages.lookup import build_lookup_stage, find_nearest_airport

AIRPORTS = (
    AirportRecord(code="AAA", name="Alpha", lat="10.0", lon="10.0"),
    AirportRecord(code="BBB", name="Bravo", lat="0.5", lon="0.5"),
    AirportRecord(code="CCC", name="Charlie", lat="-20.0", lon="30.0"),
)


def test_find_nearest_airport_returns_closest_record() -> None:
    airport = find_nearest_airport(Coordinate(lat=0.0, lon=0.0), AIRPORTS)

    assert airport.code == "BBB"


def test_find_nearest_airport_prefers_earlier_record_on_tie() -> None:
    airports = (
        AirportRecord(code="EAST", name="East", lat="0.0", lon="1.0"),
        AirportRecord(code="WEST", name="West", lat="0.0", lon="-1.0"),
    )

    assert find_nearest_airport(Coordinate(lat=0.0, lon=0.0), airports).code == "EAST"
    assert find_nearest_airport(Coordinate(lat=0.0, lon=0.0), airports[::-1]).code == "WEST"


def test_find_nearest_airport_is_deterministic() -> None:
    coordinate = Coordinate(lat=3.0, lon=4.0)

    results = {find_nearest_airport(coordinate, AIRPORTS) for _ in range(5)}

    assert len(results) == 1


def test_find_nearest_airport_raises_search_error_on_empty_dataset() -> None:
    with pytest.raises(SearchError, match="empty"):
        find_nearest_airport(Coordinate(lat=0.0, lon=0.0), ())


def test_find_nearest_airport_raises_search_error_on_unreadable_coordinates() -> None:
    airports = AIRPORTS + (AirportRecord(code="BAD", name="Broken", lat="north", lon="1.0"),)

    with pytest.raises(SearchError, match="BAD"):
        find_nearest_airport(Coordinate(lat=0.0, lon=0.0), airports)


@pytest.mark.parametrize(("lat", "lon"), [("nan", "0.0"), ("0.0", "inf"), ("-Infinity", "1.0")])
def test_find_nearest_airport_rejects_non_finite_coordinates(lat: str, lon: str) -> None:
    airports = (
        AirportRecord(code="BAD", name="Broken", lat=lat, lon=lon),
        AirportRecord(code="GOOD", name="Good", lat="0.0", lon="0.0"),
    )

    with pytest.raises(SearchError, match="BAD"):
        find_nearest_airport(Coordinate(lat=0.0, lon=0.0), airports)


def test_lookup_stage_wraps_record_in_success() -> None:
    lookup = build_lookup_stage(AIRPORTS)

    result = lookup(Coordinate(lat=-19.0, lon=29.0))

    assert result == Success(AIRPORTS[2])
