"""Route sources that supply the points of a gradient route."""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import RouteDataError
from .interfaces import GeoPoint

logger = logging.getLogger(__name__)

class RouteSource(ABC):
    """Asynchronous provider of an ordered route."""

    @abstractmethod
    async def get_route(self) -> List[GeoPoint]:
        """Fetch the route points in travel order."""

class StaticRouteSource(RouteSource):
    """Route source over points already in memory."""

    def __init__(self, points: Sequence[GeoPoint]):
        self.points = list(points)

    async def get_route(self) -> List[GeoPoint]:
        return list(self.points)

class JsonRouteSource(RouteSource):
    """Load a route from a JSON file.
    
    The file holds a single object with a ``coordinates`` list of
    ``[lat, lng]`` pairs.
    """

    def __init__(self, path: str):
        self.path = path

    async def get_route(self) -> List[GeoPoint]:
        text = await asyncio.to_thread(self._read)
        return parse_route(text)

    def _read(self) -> str:
        logger.info(f"Loading route data from {self.path}")
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

def parse_route(text: str) -> List[GeoPoint]:
    """Parse route JSON into points.
    
    Raises:
        RouteDataError: if the document is not valid route JSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse route data: {str(e)}")
        raise RouteDataError(f"Invalid route JSON: {e}") from e

    if not isinstance(data, dict) or 'coordinates' not in data:
        raise RouteDataError("Route JSON must be an object with a 'coordinates' list")

    points = []
    for i, pair in enumerate(data['coordinates']):
        try:
            lat, lng = float(pair[0]), float(pair[1])
        except (TypeError, ValueError, IndexError) as e:
            raise RouteDataError(f"Invalid coordinate at index {i}: {pair!r}") from e
        points.append(GeoPoint(lat, lng))

    logger.debug(f"Parsed route with {len(points)} points")
    return points

@dataclass
class RouteResult:
    """Outcome of fetching a route: either points or the error raised."""
    points: Optional[List[GeoPoint]] = None
    error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    def get_or_none(self) -> Optional[List[GeoPoint]]:
        return self.points if self.is_success else None

async def fetch_route(source: RouteSource) -> RouteResult:
    """Fetch a route, capturing any failure in the result."""
    try:
        return RouteResult(points=await source.get_route())
    except Exception as e:
        logger.warning(f"Failed to fetch route: {str(e)}")
        return RouteResult(error=e)
