"""Map surfaces that gradient segments are drawn onto."""

import os
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
import folium

from .config import DEFAULT_VIEW_BOUNDS, DEFAULT_ZOOM
from .interfaces import Bounds, Segment

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class OverlayHandle:
    """Reference to a segment added to a map surface."""
    index: int
    segment: Segment

class MapSurface(ABC):
    """Map that accepts line overlays and can lock user gestures.

    Both methods may only be called from the surface's own context, the
    event loop that drives rendering.
    """

    @abstractmethod
    def add_overlay(self, segment: Segment) -> OverlayHandle:
        """Add a visible line for the segment."""

    @abstractmethod
    def set_interaction_enabled(self, enabled: bool) -> None:
        """Enable or disable user pan and zoom."""

class RecordingMapSurface(MapSurface):
    """In-memory surface that keeps every call it receives."""

    def __init__(self):
        self.overlays: List[OverlayHandle] = []
        self.interaction_enabled = True
        self.interaction_changes: List[bool] = []

    def add_overlay(self, segment: Segment) -> OverlayHandle:
        handle = OverlayHandle(len(self.overlays), segment)
        self.overlays.append(handle)
        return handle

    def set_interaction_enabled(self, enabled: bool) -> None:
        self.interaction_enabled = enabled
        self.interaction_changes.append(enabled)

class FoliumMapSurface(MapSurface):
    """Surface that collects segments as folium polylines.

    Leaflet has no z-index for vector paths, so segments stack in the order
    they are added. The interaction flag is applied to the map options when
    the map is built.
    """

    def __init__(self, location: Optional[Tuple[float, float]] = None, zoom_start: int = DEFAULT_ZOOM,
                 tiles: str = 'OpenStreetMap'):
        if location is None:
            (lat1, lng1), (lat2, lng2) = DEFAULT_VIEW_BOUNDS
            location = ((lat1 + lat2) / 2, (lng1 + lng2) / 2)
        self.location = location
        self.zoom_start = zoom_start
        self.tiles = tiles
        self.layer = folium.FeatureGroup(name='Gradient route')
        self.overlays: List[OverlayHandle] = []
        self.interaction_enabled = True
        self.bounds: Optional[Bounds] = None

    def add_overlay(self, segment: Segment) -> OverlayHandle:
        style = segment.style
        options = dict(
            color=segment.color.hex,
            weight=style.width,
            opacity=1.0 if style.visible else 0.0,
            line_cap=style.end_cap,
            line_join=style.joint_type,
        )
        if style.pattern:
            options['dash_array'] = ' '.join(f"{v:g}" for v in style.pattern)
        index = len(self.overlays)
        tooltip = f"Segment {index + 1}" if style.clickable else None
        folium.PolyLine(
            [segment.start.as_tuple(), segment.end.as_tuple()],
            tooltip=tooltip,
            **options
        ).add_to(self.layer)
        handle = OverlayHandle(index, segment)
        self.overlays.append(handle)
        return handle

    def set_interaction_enabled(self, enabled: bool) -> None:
        logger.debug(f"Map interaction {'enabled' if enabled else 'disabled'}")
        self.interaction_enabled = enabled

    def fit_bounds(self, bounds: Bounds) -> None:
        """Fit the camera to the bounds when the map is built."""
        self.bounds = bounds

    def build_map(self) -> folium.Map:
        """Create the folium map holding every overlay added so far."""
        enabled = self.interaction_enabled
        m = folium.Map(
            location=list(self.location),
            zoom_start=self.zoom_start,
            tiles=self.tiles,
            dragging=enabled,
            scroll_wheel_zoom=enabled,
            touch_zoom=enabled,
            double_click_zoom=enabled,
        )
        self.layer.add_to(m)
        if self.bounds is not None:
            m.fit_bounds([self.bounds.southwest.as_tuple(), self.bounds.northeast.as_tuple()])
        return m

    def save(self, filename: str = "route_map.html") -> str:
        """Write the map as HTML.
        
        Returns:
            Absolute path of the generated HTML file
        """
        output_path = os.path.abspath(filename)
        self.build_map().save(output_path)
        logger.info(f"Saved map with {len(self.overlays)} segments to {output_path}")
        return output_path
