# raycub

Reading and checking `.cub` scene files for a grid raycaster. A scene
names four wall textures, a floor and a ceiling colour, and holds a grid
map. This package parses the header, extracts the map, and checks that
the map is playable. It raises `raycub.metadata.SceneError` with a
descriptive message whenever something is wrong.

It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Scene file format

The file starts with six metadata lines. They may come in any order, and
blank lines may appear between them:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- Each line holds an identifier and exactly one value.
- Texture paths must begin with `./`.
- A colour is three comma-separated runs of decimal digits.
- Every identifier must appear exactly once.

The map comes after the metadata. It may contain only these characters:

- `1` for a wall
- `0` for an empty floor cell
- a space for the void outside the map
- `N`, `S`, `E` or `W` for the player's start position and facing

Every floor cell and the player cell must be enclosed by the map. That
means they may not lie on its edge or next to a space. The map must hold
exactly one player and no empty lines.

## Checking a scene

```python
from raycub.metadata import SceneError, read_metadata
from raycub.mapgrid import (
    check_map_info, check_player_count, check_walls, locate_player, read_map,
)

with open("maps/example.cub", encoding="utf-8") as handle:
    lines = handle.readlines()

try:
    metadata = read_metadata(lines)
    grid = read_map(lines)
    check_map_info(grid)
    check_walls(grid)
    check_player_count(grid)
    facing, x, y, grid = locate_player(grid)
except SceneError as error:
    print(f"Error: {error}")
```

### The metadata

- `read_metadata(lines)` reads header lines up to the first map line.
  Lines can also be fed one at a time with `Metadata.add_line`, followed
  by `Metadata.check_complete`.
- `Metadata.textures` maps each `Direction` (`NORTH`, `SOUTH`, `WEST`,
  `EAST`) to its path.
- `Metadata.floor` and `Metadata.ceiling` hold the colours as `(r, g, b)`
  tuples.
- `floor_colour` and `ceiling_colour` hold the same colours packed as
  32-bit RGBA with full opacity. `convert_rgb(r, g, b)` does the packing.
- `parse_line_value`, `parse_colour` and `is_map_line` are the helpers
  behind these.

### The map

- `read_map(lines)` returns the map rows with newlines removed and padded
  with spaces to one width. Blank rows at the end are dropped.
- `find_map_start` and `measure_map` locate the map and give its size.
- `locate_player(grid)` returns the facing letter and the centre of the
  start cell as `x` and `y`. It also returns a copy of the grid with the
  start cell turned into floor.

## Utilities

The package also contains some small general-purpose modules:

- `raycub.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_space`, …), `to_upper`/`to_lower`, and the C-style integer parser `atoi` and its inverse `itoa`.
- `raycub.strings`: C-style string routines on Python strings. These are `split`, `count_words`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `bounded_copy`, `bounded_concat`, `strtrim`, `substr`, `join`, `map_indexed` and `iter_indexed`.
- `raycub.printf`: `sprintf` and `printf`. They support the `c s p d i u x X %` conversions and the space, `+` and `#` flags. `format_number`, `format_base` and `format_pointer` are also available.
- `raycub.linereader`: `LineReader`, which reads lines from raw file descriptors with a small per-descriptor buffer.
- `raycub.linkedlist`: `LinkedList` and `Node`, a singly linked list. Any node can be removed from it, and deletion callbacks can be attached.

## What it does not do

This package only parses and validates scenes. It has no window, no
renderer, no raycasting, no player movement and no keyboard handling. It
does not load texture images, and it installs no command-line program.