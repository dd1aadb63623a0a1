import numpy as np
import pytest

from config import EngineConfig
from entities.item import Item
from game.game_state import GameSession, Intent, IntentQueue
from renderer3d import Frame, Renderer3D
from utils.constants import PALETTE_COLOR, PALETTE_MONOCHROME
from utils.vector2 import Vector2


@pytest.fixture
def session():
    return GameSession(EngineConfig(grid_width=15, grid_height=15, seed=7))


def test_end_to_end_small_maze():
    session = GameSession(EngineConfig(grid_width=7, grid_height=7, seed=2024))
    world, camera = session.world, session.camera

    assert world.start_position == pytest.approx((1.5, 1.5))
    assert world.cell_code(0, 0) == 1

    start = Vector2(camera.position)
    direction = Vector2(camera.direction)
    for _ in range(3):
        session.intents.post(Intent.MOVE_FORWARD)
    session.tick()

    expected = start + direction * (3 * 0.15)
    assert camera.position.x == pytest.approx(expected.x)
    assert camera.position.y == pytest.approx(expected.y)
    assert camera.collisions == 0
    assert session.steps == 1


def test_one_step_per_tick_that_moves(session):
    session.intents.post(Intent.MOVE_FORWARD)
    session.intents.post(Intent.STRAFE_LEFT)
    session.intents.post(Intent.MOVE_BACKWARD)
    session.tick()
    assert session.steps == 1

    session.intents.post(Intent.MOVE_BACKWARD)
    session.tick()
    assert session.steps == 2


def test_tick_without_movement_takes_no_step(session):
    session.intents.post(Intent.ROTATE, 1.0)
    session.tick()
    session.tick()
    assert session.steps == 0


def test_blocked_tick_takes_no_step(session):
    # Start cell boxed in, camera pressed against its +x wall
    session.world.grid[:, :] = 1
    session.world.grid[1, 1] = 0
    session.camera.position = Vector2(1.95, 1.5)
    session.intents.post(Intent.MOVE_BACKWARD)
    session.tick()
    assert session.camera.position == Vector2(1.95, 1.5)
    assert session.steps == 0


def test_queue_is_fifo_and_drains():
    queue = IntentQueue()
    queue.post(Intent.ROTATE, 1.5)
    queue.post(Intent.MOVE_FORWARD)
    queue.post(Intent.LOOK, -1)
    assert len(queue) == 3
    assert queue.drain() == [(Intent.ROTATE, 1.5), (Intent.MOVE_FORWARD, 0.0), (Intent.LOOK, -1)]
    assert len(queue) == 0
    assert queue.drain() == []


def test_queue_rejects_unknown_intents():
    with pytest.raises(ValueError):
        IntentQueue().post('jump')


def test_tick_applies_rotation_and_look(session):
    session.intents.post(Intent.ROTATE, 2.0)
    session.intents.post(Intent.LOOK, 1.0)
    session.tick()
    assert session.camera.direction != Vector2(-1, 0)
    assert session.camera.pitch == pytest.approx(0.05)
    assert len(session.intents) == 0


def test_same_seed_same_session():
    a = GameSession(EngineConfig(grid_width=21, grid_height=21, seed=99))
    b = GameSession(EngineConfig(grid_width=21, grid_height=21, seed=99))
    assert np.array_equal(a.world.grid, b.world.grid)
    assert [(i.x, i.y, i.type) for i in a.items.items] == [(i.x, i.y, i.type) for i in b.items.items]


def test_toggle_palette(session):
    assert session.palette == PALETTE_COLOR
    session.apply(Intent.TOGGLE_PALETTE)
    assert session.palette == PALETTE_MONOCHROME
    session.apply(Intent.TOGGLE_PALETTE)
    assert session.palette == PALETTE_COLOR


def test_regenerate_resets_maze_items_and_camera(session):
    session.apply(Intent.TOGGLE_PALETTE)
    session.apply(Intent.ROTATE, 3)
    session.steps = 12
    for item in session.items.items:
        item.collect()
    old_grid = session.world.grid

    session.intents.post(Intent.REGENERATE_MAZE)
    session.tick()

    assert session.world.grid is not old_grid
    assert session.camera.position == Vector2(1.5, 1.5)
    assert session.camera.direction == Vector2(-1, 0)
    assert session.steps == 0
    assert session.items.items
    assert not any(item.collected for item in session.items.items)
    assert session.items.coins_collected == 0
    assert session.palette == PALETTE_MONOCHROME


def test_reset_camera(session):
    session.apply(Intent.ROTATE, 5)
    session.apply(Intent.LOOK, 3)
    session.camera.position = Vector2(3.5, 3.5)
    session.apply(Intent.RESET_CAMERA)
    assert session.camera.position == Vector2(1.5, 1.5)
    assert session.camera.direction == Vector2(-1, 0)
    assert session.camera.pitch == 0.0


def test_movement_collects_items(session):
    session.items.clear()
    cam = session.camera
    session.items.items.append(Item(cam.position.x, cam.position.y, 'key'))

    result = session.apply(Intent.MOVE_BACKWARD)
    assert result['keys'] == 1
    assert session.items.keys_collected == 1


def test_tick_with_renderer_returns_frame(session):
    config = session.config
    renderer = Renderer3D(160, 120, config)
    frame = session.tick(renderer)
    assert isinstance(frame, Frame)
    assert len(frame.columns) == 160
    assert session.get_stats()['palette'] == PALETTE_COLOR
