"""Gradient polyline rendering package."""

from .interfaces import GeoPoint, Color, StyleTemplate, Segment, Bounds, RenderRequest, BuildResult
from .style_types import Cap, JointType
from .errors import GradientRouteError, RouteDataError, SimplificationError
from .color import interpolate, parse_color
from .simplifier import Simplifier, ShapelySimplifier
from .segment_builder import build
from .surface import MapSurface, OverlayHandle, RecordingMapSurface, FoliumMapSurface
from .route_source import RouteSource, StaticRouteSource, JsonRouteSource, RouteResult, fetch_route
from .renderer import ProgressiveRenderer, RenderState
from .settings import Settings, load_settings
from .geo_utils import route_length_km

__all__ = [
    'GeoPoint', 'Color', 'StyleTemplate', 'Segment', 'Bounds', 'RenderRequest', 'BuildResult',
    'Cap', 'JointType',
    'GradientRouteError', 'RouteDataError', 'SimplificationError',
    'interpolate', 'parse_color',
    'Simplifier', 'ShapelySimplifier', 'build',
    'MapSurface', 'OverlayHandle', 'RecordingMapSurface', 'FoliumMapSurface',
    'RouteSource', 'StaticRouteSource', 'JsonRouteSource', 'RouteResult', 'fetch_route',
    'ProgressiveRenderer', 'RenderState',
    'Settings', 'load_settings', 'route_length_km'
]
