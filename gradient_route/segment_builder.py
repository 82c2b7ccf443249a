"""Segment building for gradient polylines."""

import logging
from typing import Optional, Sequence

from .color import interpolate
from .interfaces import Bounds, BuildResult, Color, GeoPoint, Segment, StyleTemplate

logger = logging.getLogger(__name__)

def build(route: Sequence[GeoPoint], start_color: Color, end_color: Color, style: StyleTemplate) -> BuildResult:
    """Pair adjacent route points into colored segments.
    
    Args:
        route: Simplified route points
        start_color: Color the gradient starts from
        end_color: Color the gradient runs towards
        style: Template copied into every segment
        
    Returns:
        BuildResult with ``len(route) - 1`` segments in route order, or none
        when the route has fewer than 2 points
    """
    count = len(route)
    if count < 2:
        logger.debug(f"Route has {count} point(s), nothing to build")
        return BuildResult(segments=())

    segments = []
    bounds: Optional[Bounds] = None
    for index in range(count - 1):
        point = route[index]
        bounds = Bounds.of(point) if bounds is None else bounds.include(point)
        segments.append(Segment(
            start=point,
            end=route[index + 1],
            color=interpolate(start_color, end_color, count, index),
            style=style.copy(),
        ))

    logger.debug(f"Built {len(segments)} segments from {start_color.hex} to {end_color.hex}")
    return BuildResult(segments=tuple(segments), bounds=bounds)
