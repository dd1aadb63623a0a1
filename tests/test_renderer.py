import math

import numpy as np
import pytest

from config import EngineConfig
from entities.item import Item
from game.camera import Camera
from game.world import World
from renderer3d import Frame, Renderer3D
from renderer3d.frame import GLYPH_MORTAR_H, GLYPH_MORTAR_V, mortar_capacity
from utils.colors import WALL_COLORS
from utils.constants import PALETTE_COLOR, PALETTE_MONOCHROME
from utils.vector2 import Vector2, right_of
from tests.conftest import make_grid

W, H = 640, 480


def aim(camera, direction):
    camera.direction = Vector2(direction)
    camera.plane = right_of(camera.direction) * camera.fov_plane_magnitude


@pytest.fixture
def renderer():
    return Renderer3D(W, H, EngineConfig(screen_width=W, screen_height=H))


def corridor(length):
    """Horizontal corridor from (1, 1) to (length, 1)"""
    cells = [(x, 1) for x in range(1, length + 1)]
    return World.from_grid(make_grid(length + 2, 3, cells), (1.5, 1.5))


def test_render_returns_frame(renderer, corridor_world):
    frame = renderer.render(corridor_world, Camera((1.5, 1.5)), [])
    assert isinstance(frame, Frame)
    assert frame.width == W and frame.height == H
    assert frame.columns.hit.all()
    assert frame.sprites == []


def test_column_height_for_unit_distance(renderer):
    world = World.from_grid(make_grid(5, 5, [(1, 1), (1, 2)]), (1.5, 1.5))
    cam = Camera((1.5, 1.5))
    aim(cam, (0.5, math.sqrt(3) / 2))

    cols = renderer.render(world, cam, []).columns
    c = W // 2
    assert cols.column_height[c] == math.floor(H / 1.0)
    assert cols.draw_start[c] == 0
    assert cols.draw_end[c] == H - 1


def test_draw_range_is_centered_and_clamped(renderer):
    world = corridor(3)
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    cols = renderer.render(world, cam, []).columns
    c = W // 2
    # Wall at x=4: perp 2.5
    height = math.floor(H / 2.5)
    assert cols.column_height[c] == height
    assert cols.draw_start[c] == math.floor(-height / 2 + H / 2)
    assert cols.draw_end[c] == math.floor(height / 2 + H / 2)

    cam.pitch = 0.2
    shifted = renderer.render(world, cam, []).columns
    assert shifted.draw_start[c] == math.floor(-height / 2 + H / 2 + 30)


def test_shading_x_facing(renderer):
    world = corridor(3)
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    cols = renderer.render(world, cam, [], PALETTE_MONOCHROME).columns
    c = W // 2
    expected = 1.0 - 2.5 / 22
    assert cols.side[c] == 0
    assert cols.intensity[c] == pytest.approx(expected)
    assert cols.brightness[c] == math.floor(220 * expected)
    assert tuple(cols.rgb[c]) == (int(220 * expected),) * 3


def test_shading_y_facing(renderer):
    world = World.from_grid(make_grid(3, 4, [(1, 1), (1, 2)]), (1.5, 1.5))
    cam = Camera((1.5, 1.5))
    aim(cam, (0, 1))
    cols = renderer.render(world, cam, [], PALETTE_COLOR).columns
    c = W // 2
    expected = (1.0 - 1.5 / 22) * 0.8
    assert cols.side[c] == 1
    assert cols.intensity[c] == pytest.approx(expected)
    red = WALL_COLORS[1]
    assert tuple(cols.rgb[c]) == tuple(int(v * expected) for v in red)


def test_fog_floor(renderer):
    world = corridor(28)
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    cols = renderer.render(world, cam, []).columns
    assert cols.intensity[W // 2] == pytest.approx(0.25)


def test_decorative_wall_color(renderer):
    grid = make_grid(4, 3, [(1, 1)])
    grid[1, 2] = 2
    world = World.from_grid(grid, (1.5, 1.5))
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    cols = renderer.render(world, cam, []).columns
    c = W // 2
    assert cols.cell_code[c] == 2
    shade = cols.intensity[c]
    assert tuple(cols.rgb[c]) == tuple(int(v * shade) for v in WALL_COLORS[2])


def test_missed_columns_are_blank(renderer):
    world = World.from_grid(np.zeros((5, 5), dtype=np.int8), (2.5, 2.5))
    frame = renderer.render(world, Camera((2.5, 2.5)), [])
    assert not frame.columns.hit.any()
    assert (frame.columns.rgb == 0).all()
    assert len(frame.mortar) == 0


def test_brick_overlay_near_wall(renderer, corridor_world):
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    frame = renderer.render(corridor_world, cam, [])
    mortar = frame.mortar
    assert len(mortar) > 0
    glyphs = {mortar.glyph(i) for i in range(len(mortar))}
    assert glyphs <= {GLYPH_MORTAR_V, GLYPH_MORTAR_H}
    falloff = 1.0 - 0.5 / 22
    for i in range(len(mortar)):
        expected = 0.12 if mortar.glyph(i) == GLYPH_MORTAR_V else 0.15
        assert mortar.alpha[i] == pytest.approx(expected * falloff)
        x = mortar.x[i]
        assert frame.columns.column_height[x] > 30
        if mortar.glyph(i) == GLYPH_MORTAR_H:
            assert frame.columns.draw_start[x] <= mortar.y[i] <= frame.columns.draw_end[x]


def test_mortar_buffer_is_reused(renderer, corridor_world):
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    first = renderer.render(corridor_world, cam, []).mortar
    x_array = first.x
    second = renderer.render(corridor_world, cam, []).mortar
    assert second is first
    assert second.x is x_array
    assert first.capacity == mortar_capacity(W, H)

    renderer.set_render_area(320, 200)
    resized = renderer.render(corridor_world, cam, []).mortar
    assert resized.capacity == mortar_capacity(320, 200)
    assert 0 < len(resized) <= resized.capacity


def test_no_brick_overlay_far_away(renderer):
    world = corridor(12)
    cam = Camera((1.5, 1.5))
    aim(cam, (1, 0))
    frame = renderer.render(world, cam, [])
    c = W // 2
    assert frame.columns.perp[c] == pytest.approx(11.5)
    mortar = frame.mortar
    assert not (mortar.x[:len(mortar)] == c).any()


def test_background_follows_yaw_and_horizon(renderer, corridor_world):
    cam = Camera((1.5, 1.5))
    bg = renderer.render(corridor_world, cam, []).background
    # Facing (-1, 0): yaw pi -> half the strip
    assert bg.sky_offset == 256
    assert bg.sky_y == 0
    assert bg.sky_height == H // 2
    assert bg.floor_y == H // 2
    assert bg.sky_column(0, W) == 256

    cam.pitch = -0.2
    bg = renderer.render(corridor_world, cam, []).background
    assert bg.sky_y == -30
    assert bg.floor_y == H // 2 - 30


def test_sky_strip_shape(renderer):
    assert renderer.sky.shape == (512, 256, 3)
    assert renderer.sky.dtype == np.uint8


def test_render_includes_sprites_and_minimap(renderer, open_world):
    cam = Camera((20.5, 20.5))
    items = [Item(18.5, 20.5, 'coin'), Item(25.5, 20.5, 'key')]
    frame = renderer.render(open_world, cam, items)
    assert [s.type for s in frame.sprites] == ['coin']
    assert len(frame.minimap.markers) == 2


def test_set_render_area(renderer, corridor_world):
    renderer.set_render_area(320, 200)
    frame = renderer.render(corridor_world, Camera((1.5, 1.5)), [])
    assert len(frame.columns) == 320
    assert frame.height == 200
    assert frame.minimap.size == 120
