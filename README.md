# solong

A small top-down tile puzzle game. Walk the player around a walled map,
pick up every collectible, then step onto the exit to win. Each move is
counted and printed to standard output as `Steps: N`.

## Installing

```
pip install .
```

The game draws its window with pygame.

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the map file. With any other
number of arguments it prints a usage message to standard error and exits
with status 1.

Keys:

- `W` / `A` / `S` / `D`: move up, left, down, right
- `Esc` or closing the window: quit

Walls block movement. Stepping onto a collectible picks it up. The exit
only finishes the game once every collectible has been picked up; until
then it blocks the way. Reaching the exit with everything collected prints
`Game completed!` and ends the game.

## Map files

A map is a plain text file, one row per line (lines end with `\n`), built
from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only if it

- is not empty and its first row is not empty,
- uses no other characters,
- has exactly one `P`, at least one `E` and at least one `C`,
- is enclosed by walls on every border (the width is taken from the
  first row),
- lets the player reach every collectible and every exit.

Example:

```
1111111
1P0C0E1
1111111
```

An invalid or unreadable map makes the program print `Error` and
`Invalid map` to standard error and exit with status 1.

## Textures

Tiles are drawn from XPM images in a `textures/` directory relative to
the directory the game is started from: `wall.xpm`, `floor.xpm`,
`player.xpm`, `collectible.xpm` and `exit.xpm`. Each tile takes a
64×64 pixel cell of the window. If any texture cannot be read or decoded,
the program prints `Error: Failed to load images` and exits with status 1.

Colours in the XPM files may be given as `#RRGGBB` or by X11 colour name,
compared without case (`"light blue"`, `"gray50"`, and so on); `None`
marks a transparent pixel. An unknown colour name is drawn as black.

## Using it as a library

- `solong.gamemap.load_map(path)` reads and validates a map, returning a
  `GameMap` (with `rows`, `width`, `height`, `player_x`, `player_y`,
  `collectibles`, `exits` and `tile(x, y)`); `MapError` is raised when
  the map is rejected. The individual checks are available as
  `read_map_lines`, `has_valid_characters`, `validate_walls`,
  `validate_paths` and `validate_map`.
- `solong.game.Game(game_map, output=None)` holds the play state;
  `Game.move(dx, dy)` and `Game.handle_key(keycode)` return a
  `MoveResult` (`IGNORED`, `BLOCKED`, `MOVED`, `EXIT_CLOSED`,
  `COMPLETED`, `QUIT`). Messages go to `output`, or standard output.
- `solong.xpm.load_xpm(path)`, `solong.xpm.parse_xpm_text(text)` and
  `solong.xpm.parse_xpm(lines)` decode XPM images into an `XpmImage`
  (`width`, `height`, `rows`, `pixel(x, y)`); `XpmError` reports
  malformed or unreadable input. Helpers `split_words`, `strip_comments`
  and `color_from_spec` are also exposed.
- `solong.colors.lookup_color(name)` maps an X11 colour name to its
  `0xRRGGBB` value (`-1` for `none`) and raises `KeyError` for unknown
  names.
- `solong.graphics.load_textures(directory)`, `image_to_surface(image)`,
  `tile_texture_name(tile)` and `Renderer(game, textures)` with
  `Renderer.render(surface)` draw a game onto a pygame surface.
- `solong.app.run(map_path, textures_dir="textures")` opens the game
  window and returns the exit status; `solong.app.main(argv=None)` is the
  command entry point.

## What it does not do

The step count is only printed to standard output, not drawn in the
window. There are no enemies, animations, sound, saved games or level
selection: one map file is played per run.

## Running the tests

```
pip install ".[test]"
pytest
```