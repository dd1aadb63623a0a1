"""
Collision detection and handling
"""

import logging
import math

logger = logging.getLogger(__name__)


def slide_move(world, x, y, new_x, new_y):
    """
    Axis-separated grid collision

    X is accepted only if the cell at (new_x, y) is open; Y is then tested
    against the (possibly updated) X. Blocking one axis still lets the other
    slide along the wall.

    Returns:
        (x, y, blocked_x, blocked_y)
    """
    blocked_x = world.is_wall(math.floor(new_x), math.floor(y))
    if not blocked_x:
        x = new_x

    blocked_y = world.is_wall(math.floor(x), math.floor(new_y))
    if not blocked_y:
        y = new_y

    return x, y, blocked_x, blocked_y


class CollisionHandler:
    """
    Handles camera-vs-item pickups
    """
    def __init__(self, collection_radius):
        self.collection_radius = collection_radius

    def check_camera_position(self, camera, item_manager):
        """
        Collect every uncollected item within the pickup radius

        Args:
            camera: Camera object
            item_manager: ItemManager object

        Returns:
            Dictionary with collision results:
            {
                'items': list of Items collected this call,
                'coins': coins collected this call,
                'keys': keys collected this call
            }
        """
        collected = item_manager.collect_near(
            camera.position.x, camera.position.y, self.collection_radius
        )

        result = {
            'items': collected,
            'coins': sum(1 for item in collected if item.is_coin()),
            'keys': sum(1 for item in collected if item.is_key()),
        }

        for item in collected:
            logger.info("Collected %s at (%.1f, %.1f)", item.type, item.x, item.y)

        return result
