# hotel_search/services/geo.py
from __future__ import annotations

import math

from hotel_search.services.parsing import to_float

# km per degree of arc on the reference sphere
KM_PER_DEGREE = 111.111


def compute_distance(lat_from: float, lng_from: float, lat_to: float, lng_to: float) -> float:
    """
    Great-circle distance in km between two points given in degrees
    (spherical law of cosines).
    """
    if lat_from == lat_to and lng_from == lng_to:
        return 0.0
    phi_from = math.radians(lat_from)
    phi_to = math.radians(lat_to)
    cos_angle = (
        math.sin(phi_from) * math.sin(phi_to)
        + math.cos(phi_from) * math.cos(phi_to) * math.cos(math.radians(lng_to - lng_from))
    )
    # float overshoot past ±1.0 on near-identical or antipodal points would make acos() raise
    return KM_PER_DEGREE * math.degrees(math.acos(max(-1.0, min(1.0, cos_angle))))


def parse_coordinate(value: str | float | None) -> float | None:
    """Stored coordinates are decimal strings; blank, garbage or non-finite means unknown."""
    return to_float(value)
