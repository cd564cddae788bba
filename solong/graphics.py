"""Drawing the map with one texture per tile."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

import pygame

from .game import Game
from .xpm import TRANSPARENT, XpmImage, load_xpm

TILE_SIZE = 64
TEXTURE_NAMES = ("wall", "floor", "player", "collectible", "exit")

_TILE_TEXTURES = {
    "1": "wall",
    "0": "floor",
    "P": "player",
    "C": "collectible",
    "E": "exit",
}


def tile_texture_name(tile: str) -> Optional[str]:
    """Return the texture drawn for a map tile, or None if it is not drawn."""
    return _TILE_TEXTURES.get(tile)


def load_textures(directory: Union[str, Path] = "textures") -> Dict[str, XpmImage]:
    """Load every tile texture from ``<directory>/<name>.xpm``.

    Raises ``XpmError`` if any of them cannot be read or decoded.
    """
    base = Path(directory)
    return {name: load_xpm(base / f"{name}.xpm") for name in TEXTURE_NAMES}


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded pixmap into a surface; ``None`` pixels become transparent."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA, 32)
    for y, row in enumerate(image.rows):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                colour = (0, 0, 0, 0)
            else:
                colour = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
            surface.set_at((x, y), colour)
    return surface


class Renderer:
    """Draws a game's map tile by tile onto a surface."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[str, Union[XpmImage, pygame.Surface]],
    ) -> None:
        missing = [name for name in TEXTURE_NAMES if name not in textures]
        if missing:
            raise ValueError(f"missing textures: {', '.join(missing)}")
        self.game = game
        self.textures: Dict[str, pygame.Surface] = {
            name: (
                textures[name]
                if isinstance(textures[name], pygame.Surface)
                else image_to_surface(textures[name])
            )
            for name in TEXTURE_NAMES
        }

    @property
    def size(self) -> Tuple[int, int]:
        """Pixel size of the whole map."""
        return (self.game.map.width * TILE_SIZE, self.game.map.height * TILE_SIZE)

    def render(self, surface: pygame.Surface) -> int:
        """Draw every known tile; return how many tiles were drawn."""
        drawn = 0
        for y, row in enumerate(self.game.map.rows):
            for x, tile in enumerate(row):
                name = tile_texture_name(tile)
                if name is None:
                    continue
                surface.blit(self.textures[name], (x * TILE_SIZE, y * TILE_SIZE))
                drawn += 1
        return drawn