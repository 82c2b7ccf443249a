"""Color parsing and gradient interpolation."""

import logging
import math
from typing import Sequence, Union

from .interfaces import Color

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str, Sequence[int]]


def parse_color(value: ColorLike) -> Color:
    """Parse a color specification into an opaque ``Color``.

    Accepts a ``Color``, a hex string ("#RRGGBB", "0xRRGGBB" or "RRGGBB",
    case-insensitive) or an (r, g, b) sequence with channels in 0-255.

    Raises:
        ValueError: if the value can't be interpreted as a color
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.startswith('#'):
            text = text[1:]
        elif text.lower().startswith('0x'):
            text = text[2:]
        if len(text) != 6:
            raise ValueError(f"invalid hex color length: '{value}' (expected RRGGBB)")
        try:
            red, green, blue = (int(text[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(f"invalid hex color: '{value}'") from e
        return Color.rgb(red, green, blue)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ValueError("color tuple must have exactly 3 channels (r, g, b)")
        channels = [int(c) for c in value]
        for c in channels:
            if not 0 <= c <= 255:
                raise ValueError(f"color channel out of range 0-255: {c}")
        return Color.rgb(*channels)
    raise ValueError(f"unsupported color type: {type(value)!r}")


def _channel(start: int, end: int, segment_count: int, index: int) -> int:
    norm_start = start / 255
    norm_end = end / 255
    step = (norm_end - norm_start) / segment_count
    value = norm_start + step * index
    return math.floor(value * 255 + 0.5)


def interpolate(start: Color, end: Color, segment_count: int, index: int) -> Color:
    """Get the gradient color of one segment.

    The step is ``(end - start) / segment_count``, so the color at the last
    index falls one step short of ``end``.

    Args:
        start: Color of the first segment
        end: Color the gradient runs towards
        segment_count: Number of points the gradient is spread over (>= 1)
        index: Position of the segment, 0 <= index < segment_count

    Returns:
        Opaque color with every channel clamped to [0, 255]
    """
    if segment_count < 1:
        raise ValueError(f"segment_count must be >= 1, got {segment_count}")
    return Color.rgb(
        _channel(start.red, end.red, segment_count, index),
        _channel(start.green, end.green, segment_count, index),
        _channel(start.blue, end.blue, segment_count, index),
    )
