"""Geographic utility functions for gradient routes."""

import math
from typing import List, Sequence, Tuple
from geopy.distance import geodesic

from .config import EARTH_RADIUS_M
from .interfaces import GeoPoint

def mean_latitude(points: Sequence[GeoPoint]) -> float:
    """Average latitude of the points, 0.0 for an empty sequence."""
    if not points:
        return 0.0
    return sum(p.lat for p in points) / len(points)

def to_local_xy(points: Sequence[GeoPoint], origin: GeoPoint, ref_lat: float) -> List[Tuple[float, float]]:
    """Project points onto a local planar grid in metres.
    
    Uses an equirectangular projection centred on ``origin`` and scaled at
    ``ref_lat``; accurate enough over the extent of a single route.
    
    Args:
        points: Points to project
        origin: Point mapped to (0, 0)
        ref_lat: Latitude in degrees where east-west distances are true
        
    Returns:
        List of (x, y) tuples in metres, x pointing east and y north
    """
    scale_x = math.cos(math.radians(ref_lat)) * EARTH_RADIUS_M
    xy = []
    for p in points:
        x = math.radians(p.lng - origin.lng) * scale_x
        y = math.radians(p.lat - origin.lat) * EARTH_RADIUS_M
        xy.append((x, y))
    return xy

def route_length_km(points: Sequence[GeoPoint]) -> float:
    """Geodesic length of the polyline through the points, in kilometres."""
    total = 0.0
    for a, b in zip(points, points[1:]):
        total += geodesic(a.as_tuple(), b.as_tuple()).km
    return total
