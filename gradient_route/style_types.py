"""Line style constant definitions for gradient polylines."""

class Cap:
    """Constants for line end caps."""
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

class JointType:
    """Constants for joints between consecutive line vertices."""
    DEFAULT = "miter"
    BEVEL = "bevel"
    ROUND = "round"
