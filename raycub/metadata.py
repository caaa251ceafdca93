"""Reading the texture paths and floor/ceiling colours at the head of a scene file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from raycub.chars import atoi, is_digit, is_space
from raycub.strings import split, strtrim

_MAP_CHARS = frozenset("10SNEW")


class SceneError(Exception):
    """Raised when a scene description is invalid."""


class Direction(Enum):
    """The four wall directions, valued by their scene-file identifiers."""

    NORTH = "NO"
    SOUTH = "SO"
    WEST = "WE"
    EAST = "EA"


def parse_line_value(line: str) -> str | None:
    """Return the second word of an 'ID value' line, or None unless there are exactly two."""
    words = split(strtrim(line, " \n"), " ")
    if len(words) == 2:
        return words[1]
    return None


def parse_colour(text: str) -> tuple[int, int, int]:
    """Parse 'R,G,B' into three integers; only digits may appear between commas."""
    pieces = split(text, ",")
    if len(pieces) != 3 or not all(all(is_digit(c) for c in piece) for piece in pieces):
        raise SceneError("invalid colour info")
    red, green, blue = (atoi(piece) for piece in pieces)
    return red, green, blue


def convert_rgb(r: int, g: int, b: int) -> int:
    """Pack a colour as 32-bit RGBA with full opacity."""
    return (r << 24 | g << 16 | b << 8 | 255) & 0xFFFFFFFF


def is_map_line(line: str) -> bool:
    """True when line holds a '1' and, after leading whitespace, only map characters."""
    if "1" not in line:
        return False
    body = line.lstrip("\t\n\v\f\r ")
    body = body.split("\n", 1)[0]
    if not body:
        return False
    return all(c in _MAP_CHARS or is_space(c) for c in body)


@dataclass
class Metadata:
    """Texture paths and colours gathered from the header lines of a scene."""

    textures: dict[Direction, str] = field(default_factory=dict)
    ceiling: tuple[int, int, int] | None = None
    floor: tuple[int, int, int] | None = None
    count: int = 0
    _colour_lines: int = field(default=0, repr=False)

    @property
    def ceiling_colour(self) -> int | None:
        """The ceiling colour packed as RGBA, or None if not set."""
        return None if self.ceiling is None else convert_rgb(*self.ceiling)

    @property
    def floor_colour(self) -> int | None:
        """The floor colour packed as RGBA, or None if not set."""
        return None if self.floor is None else convert_rgb(*self.floor)

    def add_line(self, line: str) -> None:
        """Record one header line; blank lines are ignored."""
        stripped = line.lstrip("\t\n\v\f\r ")
        if not stripped:
            return
        for direction in Direction:
            if stripped.startswith(direction.value):
                self._add_texture(stripped, direction)
                return
        if stripped.startswith("C"):
            self._add_colour(stripped, "ceiling")
        elif stripped.startswith("F"):
            self._add_colour(stripped, "floor")
        else:
            raise SceneError("invalid texture/colour info")

    def _add_texture(self, line: str, direction: Direction) -> None:
        path = parse_line_value(line)
        if path is None:
            raise SceneError("invalid texture/colour info")
        if not path.startswith("./"):
            raise SceneError("invalid texture path")
        if direction in self.textures:
            raise SceneError("Duplicated texture")
        self.textures[direction] = path
        self.count += 1

    def _add_colour(self, line: str, which: str) -> None:
        value = parse_line_value(line)
        if value is None:
            raise SceneError("invalid colour info")
        rgb = parse_colour(value)
        if self._colour_lines > 1:
            raise SceneError("duplicated colour info")
        # A repeated identifier keeps its first colour; the count exposes it later.
        if getattr(self, which) is None:
            setattr(self, which, rgb)
        self._colour_lines += 1
        self.count += 1

    def check_complete(self) -> None:
        """Raise SceneError unless exactly the six expected entries were given."""
        complete = (
            self.count == 6
            and all(direction in self.textures for direction in Direction)
            and self.floor is not None
            and self.ceiling is not None
        )
        if not complete:
            raise SceneError("missing or duplicated texture/colour info")


def read_metadata(lines: Iterable[str]) -> Metadata:
    """Read header lines up to the first map line and return the validated metadata."""
    metadata = Metadata()
    seen_any = False
    for line in lines:
        seen_any = True
        if is_map_line(line):
            break
        metadata.add_line(line)
    if not seen_any:
        raise SceneError("file is empty")
    metadata.check_complete()
    return metadata