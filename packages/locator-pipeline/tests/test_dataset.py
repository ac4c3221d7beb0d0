import json

import pytest

from locator_pipeline.core.exceptions import SearchError
from locator_pipeline.core.models import AirportRecord
from locator_pipeline.dataset import default_airports, load_airports, parse_airports


def test_bundled_dataset_loads_in_file_order() -> None:
    airports = load_airports()

    assert len(airports) > 10
    assert airports[0].code == "JFK"
    assert all(isinstance(item, AirportRecord) for item in airports)
    assert isinstance(airports[0].lat, str)


def test_default_airports_is_loaded_once_and_shared() -> None:
    assert default_airports() is default_airports()


def test_parse_airports_keeps_known_fields_as_text() -> None:
    airports = parse_airports(
        [{"code": "LGA", "name": "LaGuardia Airport", "lat": 40.7769, "lon": "-73.8740", "woeid": 12520509}]
    )

    assert airports == (AirportRecord(code="LGA", name="LaGuardia Airport", lat="40.7769", lon="-73.8740"),)


def test_parse_airports_rejects_rows_without_coordinates() -> None:
    with pytest.raises(SearchError, match="lat"):
        parse_airports([{"code": "XXX", "name": "Nowhere", "lon": "1.0"}])


def test_parse_airports_rejects_non_object_rows() -> None:
    with pytest.raises(SearchError):
        parse_airports(["JFK"])


def test_load_airports_reads_custom_file(tmp_path) -> None:
    source = tmp_path / "airports.json"
    source.write_text(json.dumps([{"code": "AAA", "name": "Alpha", "lat": "1.0", "lon": "2.0"}]), encoding="utf-8")

    airports = load_airports(source)

    assert [item.code for item in airports] == ["AAA"]


def test_load_airports_accepts_empty_array(tmp_path) -> None:
    source = tmp_path / "airports.json"
    source.write_text("[]", encoding="utf-8")

    assert load_airports(source) == ()


@pytest.mark.parametrize("content", ["{not json", '{"code": "AAA"}'])
def test_load_airports_rejects_malformed_files(tmp_path, content: str) -> None:
    source = tmp_path / "airports.json"
    source.write_text(content, encoding="utf-8")

    with pytest.raises(SearchError):
        load_airports(source)
