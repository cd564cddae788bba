"""Command entry point: open a window and play a map."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pygame

from .game import ESC_KEY, Game, MoveResult
from .gamemap import MapError, load_map
from .graphics import TILE_SIZE, Renderer, load_textures
from .xpm import XpmError

USAGE = "Error\nUsage: so_long <map_file.ber>\n"


def _error(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _keycode(key: int) -> int:
    return ESC_KEY if key == pygame.K_ESCAPE else key


def _draw(renderer: Renderer, screen: pygame.Surface) -> None:
    renderer.render(screen)
    pygame.display.flip()


def run(map_path: Union[str, Path], textures_dir: Union[str, Path] = "textures") -> int:
    """Play the map at ``map_path``; return the process exit status."""
    try:
        game_map = load_map(map_path)
    except MapError:
        _error("Error\nInvalid map\n")
        return 1
    game = Game(game_map)
    pygame.init()
    try:
        if not pygame.display.get_init():
            _error("Error\nFailed to initialize graphics\n")
            return 1
        try:
            screen = pygame.display.set_mode(
                (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
            )
        except pygame.error:
            _error("Error\nFailed to create game window\n")
            return 1
        pygame.display.set_caption("so_long")
        try:
            textures = load_textures(textures_dir)
        except XpmError:
            _error("Error: Failed to load images\n")
            return 1
        renderer = Renderer(game, textures)
        _draw(renderer, screen)
        while not game.finished:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            if game.handle_key(_keycode(event.key)) is MoveResult.MOVED:
                _draw(renderer, screen)
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the single map file named on the command line."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        _error(USAGE)
        return 1
    return run(args[0])


if __name__ == "__main__":
    sys.exit(main())