"""
Helper utility functions for the maze raycaster
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def distance_squared(x1, y1, x2, y2):
    """Squared Euclidean distance (for sorting)"""
    return (x2 - x1) ** 2 + (y2 - y1) ** 2


def color_lerp(color1, color2, t):
    """Interpolate between two RGB colors"""
    r = int(lerp(color1[0], color2[0], t))
    g = int(lerp(color1[1], color2[1], t))
    b = int(lerp(color1[2], color2[2], t))
    return (r, g, b)


def is_finite(*values):
    """True if every value is a finite float"""
    return all(math.isfinite(v) for v in values)
