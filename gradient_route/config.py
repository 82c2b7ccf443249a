"""Configuration constants for gradient route rendering."""

# Rendering parameters
DEFAULT_DELAY_MS = 10  # pause between consecutive segments
DEFAULT_TOLERANCE = 15.0  # metres, Douglas-Peucker tolerance
DEFAULT_WIDTH = 10.0  # line width in pixels

# Gradient colors
DEFAULT_START_COLOR = '#ff5722'
DEFAULT_END_COLOR = '#3f51b5'

# Initial map view, Cairo to Alexandria
DEFAULT_VIEW_BOUNDS = ((30.033333, 31.233334), (31.205753, 29.924526))
DEFAULT_ZOOM = 8
EARTH_RADIUS_M = 6371008.8

# Environment variable names read by the settings loader
ENV_PREFIX = 'GRADIENT_ROUTE_'
