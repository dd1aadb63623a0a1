"""
Procedural Texture Generation for 3D Maze
Generates the sky strip without external files
"""

import random
import numpy as np

from utils.colors import COLOR_SKY_TOP, COLOR_SKY_MID, COLOR_SKY_HORIZON
from utils.constants import SKY_WIDTH, SKY_HEIGHT


class TextureManager:
    """
    Manages procedural texture generation and caching
    """

    def __init__(self, sky_width=SKY_WIDTH, sky_height=SKY_HEIGHT):
        """
        Initialize texture manager

        Args:
            sky_width, sky_height: Sky strip dimensions
        """
        self.sky_width = sky_width
        self.sky_height = sky_height
        self._cache = {}
        self._seed = 42  # For reproducible textures

    def get_sky(self):
        """
        Get or generate the sky strip

        Returns:
            numpy uint8 array shape (sky_width, sky_height, 3), indexed [x, y]
        """
        key = ('sky', self.sky_width, self.sky_height)
        if key not in self._cache:
            self._cache[key] = self._generate_sky()
        return self._cache[key]

    def _generate_sky(self):
        """
        Vertical gradient with stars in the upper half and soft clouds
        near the horizon
        """
        w, h = self.sky_width, self.sky_height
        rng = random.Random(self._seed)

        # Gradient: top -> mid at h/2 -> horizon at the bottom
        t = np.linspace(0.0, 1.0, h)
        stops = np.array([COLOR_SKY_TOP, COLOR_SKY_MID, COLOR_SKY_HORIZON], dtype=np.float64)
        column = np.empty((h, 3), dtype=np.float64)
        for ch in range(3):
            column[:, ch] = np.interp(t, [0.0, 0.5, 1.0], stops[:, ch])
        sky = np.repeat(column[np.newaxis, :, :], w, axis=0)

        # Stars
        white = np.array([255.0, 255.0, 255.0])
        for _ in range(80):
            x = int(rng.random() * w)
            y = int(rng.random() * (h // 2))
            size = max(1, int(round(rng.random() * 1.5)))
            alpha = 0.4 + rng.random() * 0.6
            patch = sky[x:x + size, y:y + size]
            patch += (white - patch) * alpha

        # Clouds (ellipses, wrapped horizontally)
        xs = np.arange(w)[:, np.newaxis]
        ys = np.arange(h)[np.newaxis, :]
        for _ in range(5):
            cx = rng.random() * w
            cy = h * 0.59 + rng.random() * h * 0.31
            dx = np.minimum(np.abs(xs - cx), w - np.abs(xs - cx))
            mask = (dx / 35.0) ** 2 + ((ys - cy) / 12.0) ** 2 <= 1.0
            sky[mask] += (white - sky[mask]) * 0.35

        return np.clip(sky, 0, 255).astype(np.uint8)
