"""Extracting the map grid from a scene file and checking that it is playable."""

from __future__ import annotations

from typing import Sequence

from raycub.metadata import SceneError
from raycub.strings import strtrim

_VALID_CHARS = frozenset("10 SNEW")
_PLAYER_CHARS = frozenset("SNEW")
_ENCLOSED_CHARS = frozenset("0SNEW")
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _is_space(c: str) -> bool:
    return c in _WHITESPACE


def _is_blank(row: str) -> bool:
    return all(_is_space(c) for c in row)


def is_valid_char(c: str) -> bool:
    """True for the characters a map may hold: walls, floor, space and player starts."""
    return c in _VALID_CHARS


def _is_start_line(line: str) -> bool:
    if "1" not in line and "0" not in line:
        return False
    return all(c in "10" or _is_space(c) for c in line)


def find_map_start(lines: Sequence[str]) -> int | None:
    """Index of the first line made only of walls, floor and whitespace, or None."""
    for index, line in enumerate(lines):
        if _is_start_line(line):
            return index
    return None


def measure_map(lines: Sequence[str]) -> tuple[int, int]:
    """Return (rows, columns) of the map part of lines.

    Rows counts every line from the start of the map to the end of input.
    Columns is the longest newline-terminated line made only of map
    characters, the newline included.
    """
    start = find_map_start(lines)
    if start is None:
        return 0, 0
    rows = 0
    width = 0
    for line in lines[start:]:
        if not line:
            break
        valid = 0
        for c in line:
            if not (is_valid_char(c) or _is_space(c)):
                break
            valid += 1
        if valid == len(line) and line.endswith("\n"):
            width = max(width, valid)
        rows += 1
    return rows, width


def read_map(lines: Sequence[str]) -> list[str]:
    """Return the map rows, newlines removed, padded with spaces to one width.

    Blank rows at the end of the map are dropped.
    """
    start = find_map_start(lines)
    if start is None:
        return []
    rows, width = measure_map(lines)
    grid = [strtrim(line, "\n")[:width].ljust(width) for line in lines[start : start + rows]]
    while grid and _is_blank(grid[-1]):
        grid.pop()
    return grid


def _is_empty_line_in_map(grid: Sequence[str], index: int) -> bool:
    if grid[index]:
        return False
    return any(not _is_blank(row) for row in grid[index:])


def check_map_info(grid: Sequence[str]) -> None:
    """Raise SceneError on an empty row inside the map or an invalid character."""
    for index, row in enumerate(grid):
        if _is_empty_line_in_map(grid, index):
            raise SceneError("empty line in map")
        for c in row:
            if not is_valid_char(c):
                raise SceneError(f"invalid character <{c}> in map")


def _at(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return " "


def check_walls(grid: Sequence[str]) -> None:
    """Raise SceneError unless every floor and player cell is enclosed by the map."""
    last = len(grid) - 1
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if c not in _ENCLOSED_CHARS:
                continue
            on_border = i == 0 or i == last or j == 0 or j == len(row) - 1
            neighbours = (_at(grid, i - 1, j), _at(grid, i + 1, j), _at(grid, i, j - 1), _at(grid, i, j + 1))
            if on_border or any(_is_space(n) for n in neighbours):
                raise SceneError(f"map is not surrounded by walls at row {i}, column {j}")


def check_player_count(grid: Sequence[str]) -> None:
    """Raise SceneError unless the map holds exactly one player start."""
    count = sum(1 for row in grid for c in row if c in _PLAYER_CHARS)
    if count != 1:
        raise SceneError("invalid number of player positions")


def locate_player(grid: Sequence[str]) -> tuple[str, float, float, list[str]]:
    """Find the player start.

    Returns its facing letter, the centre of its cell as x and y, and a copy
    of the grid with the start replaced by floor. With several starts the
    last one wins.
    """
    found: tuple[str, float, float] | None = None
    cleaned: list[str] = []
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c in _PLAYER_CHARS:
                found = (c, x + 0.5, y + 0.5)
        cleaned.append("".join("0" if c in _PLAYER_CHARS else c for c in row))
    if found is None:
        raise SceneError("no player position in map")
    pov, px, py = found
    return pov, px, py, cleaned