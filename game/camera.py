"""
Camera - first-person position/orientation with grid collision and view bob
"""

import math

from game.collision import slide_move
from utils.constants import (
    START_DIRECTION, FOV_PLANE_MAGNITUDE, MOVE_SPEED, ROT_SPEED, LOOK_SPEED,
    MAX_PITCH, BOB_STEP, BOB_AMPLITUDE, PITCH_SCALE, BOB_SCALE
)
from utils.helpers import clamp
from utils.vector2 import Vector2, normalized, rotated, right_of


class Camera:
    """
    First-person camera

    `direction` is a unit vector; `plane` is perpendicular to it and its
    length sets the field of view. Both rotate together.
    """

    def __init__(self, position, direction=START_DIRECTION,
                 fov_plane_magnitude=FOV_PLANE_MAGNITUDE,
                 move_speed=MOVE_SPEED, rot_speed=ROT_SPEED,
                 bob_amplitude=BOB_AMPLITUDE):
        """
        Args:
            position: (x, y) continuous start position
            direction: View direction (normalized here)
            fov_plane_magnitude: Camera plane length (0.66 ~ 66 degree FOV)
            move_speed: Units per movement intent
            rot_speed: Radians per rotation unit
            bob_amplitude: View bob amplitude
        """
        self.fov_plane_magnitude = fov_plane_magnitude
        self.move_speed = move_speed
        self.rot_speed = rot_speed
        self.bob_amplitude = bob_amplitude

        self.position = Vector2(position)
        self.direction = normalized(Vector2(direction))
        self.plane = right_of(self.direction) * fov_plane_magnitude

        # Vertical look and walking bob
        self.pitch = 0.0
        self.bob_phase = 0.0

        # Blocked axis checks since creation
        self.collisions = 0

    @classmethod
    def from_config(cls, position, config, direction=START_DIRECTION):
        """Build a camera using EngineConfig tuning"""
        return cls(
            position, direction,
            fov_plane_magnitude=config.fov_plane_magnitude,
            move_speed=config.move_speed,
            rot_speed=config.rot_speed,
            bob_amplitude=config.bob_amplitude,
        )

    def _move(self, world, offset):
        """Apply an offset with axis-separated collision; True if position changed"""
        old_x, old_y = self.position.x, self.position.y
        target = self.position + offset

        x, y, blocked_x, blocked_y = slide_move(world, old_x, old_y, target.x, target.y)
        self.position.x = x
        self.position.y = y
        self.collisions += int(blocked_x) + int(blocked_y)

        self.bob_phase += BOB_STEP
        return (x, y) != (old_x, old_y)

    def move_forward(self, world):
        """Step along the view direction"""
        return self._move(world, self.direction * self.move_speed)

    def move_backward(self, world):
        """Step against the view direction"""
        return self._move(world, self.direction * -self.move_speed)

    def strafe_left(self, world):
        """Step toward the left screen edge"""
        return self._move(world, right_of(self.direction) * -self.move_speed)

    def strafe_right(self, world):
        """Step toward the right screen edge"""
        return self._move(world, right_of(self.direction) * self.move_speed)

    def rotate(self, units):
        """
        Rotate view

        Args:
            units: Signed rotation units (scaled by rot_speed)
        """
        angle = units * self.rot_speed
        self.direction = rotated(self.direction, angle)
        self.plane = rotated(self.plane, angle)

    def look(self, units):
        """Change pitch, clamped to a projection-safe range"""
        self.pitch = clamp(self.pitch + units * LOOK_SPEED, -MAX_PITCH, MAX_PITCH)

    def get_view_bob(self):
        """Current walking bob, before screen scaling"""
        return math.sin(self.bob_phase) * self.bob_amplitude

    def horizon_offset(self):
        """Vertical horizon shift in screen rows (pitch + walking bob)"""
        return int(math.floor(self.pitch * PITCH_SCALE + self.get_view_bob() * BOB_SCALE))

    def get_angle(self):
        """Yaw in radians"""
        return math.atan2(self.direction.y, self.direction.x)

    def reset(self, position, direction=START_DIRECTION):
        """Return to a start position with default orientation and level view"""
        self.position = Vector2(position)
        self.direction = normalized(Vector2(direction))
        self.plane = right_of(self.direction) * self.fov_plane_magnitude
        self.pitch = 0.0

    def __repr__(self):
        return (f"Camera(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"dir=({self.direction.x:.2f}, {self.direction.y:.2f}))")
