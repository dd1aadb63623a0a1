"""
2D vector math on top of pygame.math.Vector2
"""

from pygame.math import Vector2

__all__ = ['Vector2', 'normalized', 'rotated', 'right_of']


def normalized(v):
    """
    Unit vector in the direction of v

    pygame raises on a zero-length vector; here the zero vector is
    returned unchanged.
    """
    if v.length_squared() > 0:
        return v.normalize()
    return Vector2(v)


def rotated(v, angle):
    """Rotate v by angle radians (standard 2D rotation)"""
    return v.rotate_rad(angle)


def right_of(direction):
    """Vector perpendicular to direction, pointing at the right screen edge"""
    return Vector2(direction.y, -direction.x)
