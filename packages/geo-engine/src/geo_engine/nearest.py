from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from geo_engine.distance import haversine_distance_km
from geo_engine.models import GeoPoint

T = TypeVar("T")


class EmptyCandidatesError(ValueError):
    """Raised when a nearest search is asked to pick from nothing."""


def find_nearest(
    origin: GeoPoint,
    candidates: Iterable[T],
    locate: Callable[[T], GeoPoint],
) -> tuple[T, float]:
    """Return the candidate closest to ``origin`` and its distance in km.

    Candidates are scanned once, left to right. The running best is only
    replaced by a strictly closer candidate, so on equal distances the one
    seen first wins.
    """
    best: T | None = None
    best_distance = math.inf
    found = False
    for candidate in candidates:
        distance = haversine_distance_km(origin, locate(candidate))
        if not found or distance < best_distance:
            best, best_distance, found = candidate, distance, True
    if not found:
        raise EmptyCandidatesError("no candidates to search")
    return best, best_distance  # type: ignore[return-value]
