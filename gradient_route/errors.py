"""Exception types raised by the gradient route engine."""


class GradientRouteError(Exception):
    """Base class for gradient route errors."""


class RouteDataError(GradientRouteError):
    """Raised when a route source yields malformed coordinate data."""


class SimplificationError(GradientRouteError):
    """Raised when the route simplifier fails during the compute phase."""
