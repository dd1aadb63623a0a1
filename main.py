"""
Maze Raycaster - first-person maze with collectibles
"""

import argparse
import logging
import os
import sys

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

from config import GAME_TITLE, GAME_VERSION, EngineConfig
from game.game_state import GameSession, Intent
from renderer3d import Renderer3D
from renderer3d.rasterizer import PygameRasterizer
from utils.constants import FPS, MOUSE_ROTATE_FACTOR

logger = logging.getLogger(__name__)

# Held keys -> intent posted once per frame, however many of its keys are down
HELD_KEYS = (
    ((pygame.K_w, pygame.K_UP), Intent.MOVE_FORWARD, 0.0),
    ((pygame.K_s, pygame.K_DOWN), Intent.MOVE_BACKWARD, 0.0),
    ((pygame.K_a,), Intent.STRAFE_LEFT, 0.0),
    ((pygame.K_d,), Intent.STRAFE_RIGHT, 0.0),
    ((pygame.K_LEFT,), Intent.ROTATE, -1.0),
    ((pygame.K_RIGHT,), Intent.ROTATE, 1.0),
    ((pygame.K_PAGEUP,), Intent.LOOK, 1.0),
    ((pygame.K_PAGEDOWN,), Intent.LOOK, -1.0),
)

# One-shot keys
PRESSED_KEYS = {
    pygame.K_r: Intent.RESET_CAMERA,
    pygame.K_n: Intent.REGENERATE_MAZE,
    pygame.K_m: Intent.TOGGLE_PALETTE,
}


def held_intents(keys):
    """
    Args:
        keys: Pressed-key state indexable by key code (pygame.key.get_pressed())

    Returns:
        list of (intent, amount) for this frame
    """
    return [(intent, amount) for codes, intent, amount in HELD_KEYS
            if any(keys[code] for code in codes)]


class MazeGame:
    """
    Main game class - window, input translation and frame loop
    """
    def __init__(self, config):
        pygame.init()

        self.config = config
        self.session = GameSession(config)
        self.renderer = Renderer3D(config.screen_width, config.screen_height, config)
        self.rasterizer = PygameRasterizer()

        self.screen_w = config.screen_width
        self.screen_h = config.screen_height
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h), pygame.RESIZABLE)
        self.title = f"{GAME_TITLE} v{GAME_VERSION}"
        pygame.display.set_caption(self.title)

        self.clock = pygame.time.Clock()
        self.running = True
        self.mouse_dragging = False

        logger.info("Started %s (%s)", self.title, config)

    def handle_events(self):
        """Translate input events into intents"""
        intents = self.session.intents

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self._on_screen_resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                intent = PRESSED_KEYS.get(event.key)
                if intent is not None:
                    intents.post(intent)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.mouse_dragging = False
            elif event.type == pygame.MOUSEMOTION and self.mouse_dragging:
                dx = event.rel[0]
                if dx:
                    intents.post(Intent.ROTATE, dx * MOUSE_ROTATE_FACTOR)

        for intent, amount in held_intents(pygame.key.get_pressed()):
            intents.post(intent, amount)

    def _on_screen_resize(self, width, height):
        self.screen_w = max(1, width)
        self.screen_h = max(1, height)
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h), pygame.RESIZABLE)
        self.renderer.set_render_area(self.screen_w, self.screen_h)

    def render(self):
        """Advance one tick and draw the resulting frame"""
        frame = self.session.tick(self.renderer)
        self.rasterizer.draw(self.screen, frame)
        pygame.display.flip()

        stats = self.session.get_stats()
        pygame.display.set_caption(
            f"{self.title} | coins {stats['coins']} keys {stats['keys']} "
            f"steps {stats['steps']} fps {self.clock.get_fps():.0f}"
        )

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            if self.running:
                self.render()

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=GAME_TITLE)
    parser.add_argument('--width', type=int, default=None, help="maze width in cells")
    parser.add_argument('--height', type=int, default=None, help="maze height in cells")
    parser.add_argument('--seed', type=int, default=None, help="RNG seed for reproducible mazes")
    parser.add_argument('--debug', action='store_true', help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    options = {'seed': args.seed}
    if args.width is not None:
        options['grid_width'] = args.width
    if args.height is not None:
        options['grid_height'] = args.height

    game = MazeGame(EngineConfig(**options))
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
