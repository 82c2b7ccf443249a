"""Route simplification for gradient polylines."""

import logging
from abc import ABC, abstractmethod
from typing import List, Sequence
from shapely.geometry import LineString

from .errors import SimplificationError
from .geo_utils import mean_latitude, to_local_xy
from .interfaces import GeoPoint

logger = logging.getLogger(__name__)

class Simplifier(ABC):
    """Reduces a point sequence to a visually equivalent subset."""

    @abstractmethod
    def simplify(self, points: Sequence[GeoPoint], tolerance: float) -> List[GeoPoint]:
        """Simplify the route.
        
        Implementations must be deterministic, keep the first and last
        points, and return at least 2 points whenever given at least 2.
        """

class ShapelySimplifier(Simplifier):
    """Douglas-Peucker simplification with a tolerance in metres."""

    def simplify(self, points: Sequence[GeoPoint], tolerance: float) -> List[GeoPoint]:
        """Simplify the route using shapely.
        
        Args:
            points: Ordered route points
            tolerance: Maximum distance in metres a dropped point may lie
                from the simplified line
            
        Returns:
            Ordered subsequence of ``points``
        """
        points = list(points)
        if len(points) < 2:
            return points

        xy = to_local_xy(points, points[0], mean_latitude(points))
        try:
            simplified = LineString(xy).simplify(tolerance, preserve_topology=False)
        except Exception as e:
            logger.error(f"Failed to simplify route of {len(points)} points: {str(e)}")
            raise SimplificationError(f"Failed to simplify route: {e}") from e

        kept = self._match_vertices(points, xy, list(simplified.coords))
        if len(kept) < 2:
            # A route that collapses onto itself still spans its endpoints.
            kept = [points[0], points[-1]]
        logger.debug(f"Simplified route from {len(points)} to {len(kept)} points (tolerance {tolerance}m)")
        return kept

    @staticmethod
    def _match_vertices(points: List[GeoPoint], xy: List[tuple], coords: List[tuple]) -> List[GeoPoint]:
        """Map simplified coordinates back to the original points, in order."""
        kept = []
        idx = 0
        for coord in coords:
            while idx < len(xy) and tuple(xy[idx]) != tuple(coord[:2]):
                idx += 1
            if idx >= len(xy):
                break
            kept.append(points[idx])
            idx += 1
        return kept
