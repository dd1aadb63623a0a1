import math

import pytest

from entities.item import Item
from game.camera import Camera
from renderer3d.sprites import SpriteProjector
from utils.colors import COLOR_COIN, COLOR_MONOCHROME_ITEM
from utils.constants import PALETTE_MONOCHROME

W, H = 800, 600


@pytest.fixture
def camera():
    # Facing (-1, 0)
    return Camera((10.5, 10.5))


@pytest.fixture
def projector():
    return SpriteProjector(W, H)


def test_item_straight_ahead(camera, projector):
    placements = projector.project(camera, [Item(8.5, 10.5, 'coin')])
    assert len(placements) == 1
    p = placements[0]
    assert p.screen_x == W // 2
    assert p.depth == pytest.approx(2.0)
    assert p.size == abs(math.floor(H / p.depth)) * 0.5
    assert p.size == pytest.approx(150, abs=0.5)
    assert p.screen_y == H / 2
    assert p.color == COLOR_COIN
    assert p.glyph == '◉'


def test_item_behind_is_culled(camera, projector):
    assert projector.project(camera, [Item(12.5, 10.5, 'coin')]) == []


def test_item_beside_is_culled(camera, projector):
    # Depth 0: exactly abeam of the camera
    assert projector.project(camera, [Item(10.5, 13.5, 'key')]) == []


def test_item_too_far_is_culled(camera, projector):
    assert projector.project(camera, [Item(10.5 - 15.2, 10.5, 'coin')]) == []
    assert len(projector.project(camera, [Item(10.5 - 14.5, 10.5, 'coin')])) == 1


def test_tiny_sprite_is_culled(camera):
    projector = SpriteProjector(80, 8)
    assert projector.project(camera, [Item(8.5, 10.5, 'coin')]) == []


def test_collected_items_are_skipped(camera, projector):
    item = Item(8.5, 10.5, 'coin')
    item.collect()
    assert projector.project(camera, [item]) == []


def test_back_to_front_order(camera, projector):
    items = [Item(9.5, 10.5, 'coin'), Item(4.5, 10.5, 'key'), Item(7.5, 10.6, 'coin')]
    placements = projector.project(camera, items)
    depths = [p.depth for p in placements]
    assert depths == sorted(depths, reverse=True)
    assert placements[0].type == 'key'


def test_off_axis_item_lands_off_center(camera, projector):
    # Right of a camera facing (-1, 0) is +y
    p = projector.project(camera, [Item(8.5, 11.5, 'coin')])[0]
    assert p.screen_x > W // 2
    q = projector.project(camera, [Item(8.5, 9.5, 'coin')])[0]
    assert q.screen_x < W // 2


def test_vertical_center_ignores_pitch(camera, projector):
    camera.pitch = 0.5
    camera.bob_phase = 1.0
    p = projector.project(camera, [Item(8.5, 10.5, 'coin')])[0]
    assert p.screen_y == H / 2


def test_monochrome_palette(camera, projector):
    p = projector.project(camera, [Item(8.5, 10.5, 'key')], PALETTE_MONOCHROME)[0]
    assert p.color == COLOR_MONOCHROME_ITEM


def test_degenerate_plane_emits_nothing(camera, projector):
    camera.plane = camera.direction * 0.66
    assert projector.project(camera, [Item(8.5, 10.5, 'coin')]) == []
