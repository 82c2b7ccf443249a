"""Settings loading for gradient route rendering."""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence
from dotenv import load_dotenv

from .color import parse_color
from .config import (
    DEFAULT_DELAY_MS, DEFAULT_END_COLOR, DEFAULT_START_COLOR,
    DEFAULT_TOLERANCE, DEFAULT_WIDTH, ENV_PREFIX
)
from .interfaces import Color, GeoPoint, RenderRequest, StyleTemplate
from .style_types import Cap, JointType

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Settings:
    """Render configuration: style, pacing and gradient colors."""
    start_color: Color
    end_color: Color
    delay_ms: float = DEFAULT_DELAY_MS
    tolerance: float = DEFAULT_TOLERANCE
    width: float = DEFAULT_WIDTH

    def default_style(self) -> StyleTemplate:
        """Style used by the demo route: square caps and round joints."""
        return StyleTemplate(
            width=self.width,
            start_cap=Cap.SQUARE,
            end_cap=Cap.SQUARE,
            joint_type=JointType.ROUND,
        )

    def to_request(self, route: Sequence[GeoPoint], style: Optional[StyleTemplate] = None) -> RenderRequest:
        """Build the render request for a route."""
        return RenderRequest(
            route=tuple(route),
            start_color=self.start_color,
            end_color=self.end_color,
            style=style or self.default_style(),
            delay_ms=self.delay_ms,
            tolerance=self.tolerance,
        )

def _number(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX + name} must be a number, got '{raw}'") from e
    if value < 0:
        raise ValueError(f"{ENV_PREFIX + name} must be non-negative, got {value}")
    return value

def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from the environment.
    
    When ``env`` is None, variables from a ``.env`` file are loaded into the
    process environment first.
    
    Raises:
        ValueError: if a variable holds an invalid value
    """
    if env is None:
        load_dotenv()
        env = os.environ

    settings = Settings(
        start_color=parse_color(env.get(ENV_PREFIX + 'START_COLOR') or DEFAULT_START_COLOR),
        end_color=parse_color(env.get(ENV_PREFIX + 'END_COLOR') or DEFAULT_END_COLOR),
        delay_ms=_number(env, 'DELAY_MS', DEFAULT_DELAY_MS),
        tolerance=_number(env, 'TOLERANCE', DEFAULT_TOLERANCE),
        width=_number(env, 'WIDTH', DEFAULT_WIDTH),
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
