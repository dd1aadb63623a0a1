"""
3D Renderer Module - Wolfenstein3D style raycasting
"""

from .raycaster import Raycaster, ColumnBuffer
from .renderer import Renderer3D
from .textures import TextureManager
from .sprites import SpriteProjector
from .minimap import MinimapProjector
from .frame import Frame, Background, MortarBuffer, SpritePlacement, MinimapLayer

__all__ = ['Raycaster', 'ColumnBuffer', 'Renderer3D', 'TextureManager',
           'SpriteProjector', 'MinimapProjector',
           'Frame', 'Background', 'MortarBuffer', 'SpritePlacement', 'MinimapLayer']
