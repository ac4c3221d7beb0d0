from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import fields
from functools import lru_cache
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from locator_pipeline.core.exceptions import SearchError
from locator_pipeline.core.models import AirportRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("code", "name", "lat", "lon")
_RECORD_FIELDS = tuple(item.name for item in fields(AirportRecord))


def bundled_dataset() -> Traversable:
    return files("locator_pipeline") / "data" / "airports.json"


def parse_airports(rows: Iterable[Mapping[str, Any]]) -> tuple[AirportRecord, ...]:
    """Turn raw dataset rows into immutable records, keeping their order.

    ``lat``/``lon`` stay as text; they are parsed when a lookup needs them.
    Unknown keys are dropped.
    """
    records: list[AirportRecord] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise SearchError(f"Airport dataset entry {index} is not an object.")
        missing = [name for name in REQUIRED_FIELDS if row.get(name) in (None, "")]
        if missing:
            raise SearchError(
                f"Airport dataset entry {index} is missing required fields: {', '.join(missing)}"
            )
        values = {name: str(row[name]) for name in _RECORD_FIELDS if row.get(name) is not None}
        records.append(AirportRecord(**values))
    return tuple(records)


def load_airports(source: Traversable | Path | None = None) -> tuple[AirportRecord, ...]:
    source = source if source is not None else bundled_dataset()
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SearchError(f"Airport dataset is not valid JSON: {exc.msg}") from exc
    if not isinstance(raw, list):
        raise SearchError("Airport dataset must be a JSON array.")
    airports = parse_airports(raw)
    logger.info(
        "airport_dataset_loaded",
        extra={"component": "locator_pipeline", "source": str(source), "count": len(airports)},
    )
    return airports


@lru_cache(maxsize=1)
def default_airports() -> tuple[AirportRecord, ...]:
    """Bundled table, parsed once per process and shared by every execution."""
    return load_airports()
