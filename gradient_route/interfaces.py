"""Type definitions and interfaces for gradient route rendering."""

from typing import Optional, Tuple
from dataclasses import dataclass, field, replace

from .config import DEFAULT_DELAY_MS, DEFAULT_TOLERANCE, DEFAULT_WIDTH
from .style_types import Cap, JointType


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class GeoPoint:
    """A geographic point in decimal degrees."""
    lat: float
    lng: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


@dataclass(frozen=True)
class Color:
    """Packed 32-bit ARGB color.

    Channel accessors return values in 0-255. Colors built through
    ``Color.rgb`` are always fully opaque.
    """
    value: int

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Build an opaque color, clamping each channel to [0, 255]."""
        return cls(
            (0xFF << 24)
            | (_clamp_channel(red) << 16)
            | (_clamp_channel(green) << 8)
            | _clamp_channel(blue)
        )

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        from .color import parse_color
        return parse_color(text)

    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class StyleTemplate:
    """Line style shared by every generated segment.

    Everything except the color is copied verbatim into each segment.
    """
    width: float = DEFAULT_WIDTH
    color: Color = field(default_factory=lambda: Color.rgb(0, 0, 0))
    z_index: float = 0.0
    visible: bool = True
    geodesic: bool = False
    clickable: bool = False
    start_cap: str = Cap.BUTT
    end_cap: str = Cap.BUTT
    joint_type: str = JointType.DEFAULT
    pattern: Optional[Tuple[float, ...]] = None

    def copy(self) -> "StyleTemplate":
        """Return an independent copy of this template."""
        pattern = tuple(self.pattern) if self.pattern is not None else None
        return replace(self, pattern=pattern)


@dataclass(frozen=True)
class Segment:
    """A colored straight line between two consecutive route points."""
    start: GeoPoint
    end: GeoPoint
    color: Color
    style: StyleTemplate


@dataclass(frozen=True)
class Bounds:
    """Bounding region of a set of points."""
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def of(cls, point: GeoPoint) -> "Bounds":
        return cls(point.lat, point.lng, point.lat, point.lng)

    def include(self, point: GeoPoint) -> "Bounds":
        """Return bounds widened to contain ``point``."""
        return Bounds(
            min(self.south, point.lat),
            min(self.west, point.lng),
            max(self.north, point.lat),
            max(self.east, point.lng),
        )

    @property
    def southwest(self) -> GeoPoint:
        return GeoPoint(self.south, self.west)

    @property
    def northeast(self) -> GeoPoint:
        return GeoPoint(self.north, self.east)

    @property
    def center(self) -> GeoPoint:
        return GeoPoint((self.south + self.north) / 2, (self.west + self.east) / 2)


@dataclass(frozen=True)
class RenderRequest:
    """Everything needed for one progressive draw."""
    route: Tuple[GeoPoint, ...]
    start_color: Color
    end_color: Color
    style: StyleTemplate = field(default_factory=StyleTemplate)
    delay_ms: float = DEFAULT_DELAY_MS
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self):
        # Freeze the route so the request can't be changed from outside.
        object.__setattr__(self, "route", tuple(self.route))
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")


@dataclass(frozen=True)
class BuildResult:
    """Segments produced for a route plus the region they were built over.

    ``bounds`` holds the start point of every segment and is None when no
    segments were built. Nothing in the renderer consumes it.
    """
    segments: Tuple[Segment, ...]
    bounds: Optional[Bounds] = None

    def __len__(self) -> int:
        return len(self.segments)
